"""
Numerical fallbacks for distributions without closed forms.

Both strategies see only an evaluator with the (t, par) signature; they
know nothing about how the evaluator is assembled, so they work the same
for leaf distributions and for composed systems.

  integrate_hazard — H(t) = ∫_0^t h(s) ds by adaptive quadrature
  invert_cum_haz   — t such that H(t) = target, by bracketing + Brent
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from scipy import integrate, optimize

from core.config import DEFAULT_NUMERICS, NumericsConfig

Evaluator = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _pointwise(fn: Evaluator, par: np.ndarray) -> Callable[[float], float]:
    def scalar_fn(x: float) -> float:
        return float(np.asarray(fn(np.array([x]), par), dtype=float).reshape(-1)[0])
    return scalar_fn


def integrate_hazard(
    rate: Evaluator,
    t: np.ndarray,
    par: np.ndarray,
    config: NumericsConfig = DEFAULT_NUMERICS,
) -> np.ndarray:
    """
    Cumulative hazard at each element of t by integrating the hazard rate from 0.

    Each element is integrated independently, so the result for an array
    equals the results for its elements taken one at a time.
    """
    h = _pointwise(rate, par)
    out = np.empty(len(t), dtype=float)
    for i, ti in enumerate(t):
        if np.isnan(ti):
            out[i] = np.nan
        elif ti == 0.0:
            out[i] = 0.0
        else:
            out[i] = integrate.quad(
                h,
                0.0,
                ti,
                epsabs=config.quad_epsabs,
                epsrel=config.quad_epsrel,
                limit=config.quad_limit,
            )[0]
    return out


def invert_cum_haz(
    cum_haz: Evaluator,
    targets: np.ndarray,
    par: np.ndarray,
    config: NumericsConfig = DEFAULT_NUMERICS,
) -> np.ndarray:
    """
    Solve H(t) = target for each target (H assumed non-decreasing with H(0) = 0).

    Target 0 maps to 0 and +inf to +inf; negative or NaN targets give NaN.
    Raises ValueError when no bracket is found within config.max_doublings.
    """
    H = _pointwise(cum_haz, par)
    out = np.empty(len(targets), dtype=float)
    for i, target in enumerate(targets):
        if np.isnan(target) or target < 0:
            out[i] = np.nan
            continue
        if target == 0.0:
            out[i] = 0.0
            continue
        if np.isinf(target):
            out[i] = np.inf
            continue

        lower, upper = 0.0, config.bracket_upper
        for _ in range(config.max_doublings):
            if H(upper) >= target:
                break
            lower, upper = upper, upper * 2.0
        else:
            raise ValueError(
                f"Could not bracket cumulative hazard target {target:.6g} "
                f"below t={upper:.6g}"
            )

        out[i] = optimize.brentq(
            lambda x: H(x) - target, lower, upper, xtol=config.root_xtol
        )
    return out
