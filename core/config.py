"""
Numerical and fitting configuration.
Defaults are tuned for lifetimes on the order of 1e-2 .. 1e4 time units.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NumericsConfig:
    # cumulative hazard by quadrature when no closed form exists
    quad_epsabs: float = 1.49e-10
    quad_epsrel: float = 1.49e-10
    quad_limit: int = 200

    # inverse cumulative hazard: bracket by doubling, then brentq
    bracket_upper: float = 1.0
    max_doublings: int = 200
    root_xtol: float = 1e-12


@dataclass(frozen=True)
class FitConfig:
    method: str = "Nelder-Mead"
    maxiter: Optional[int] = 5000
    xatol: float = 1e-6
    fatol: float = 1e-8

    # relative finite-difference steps for score / Hessian
    score_step: float = 1e-6
    hess_step: float = 1e-4


DEFAULT_NUMERICS = NumericsConfig()
DEFAULT_FIT = FitConfig()
