"""
Reference parametric families with closed-form hazard, cumulative hazard and quantiles.

Each family may be built without parameters (par is None); such a
distribution can still be composed into a series system when the caller
supplies the parameter counts explicitly.

  Exponential  h = λ                                H = λt
  Weibull      h = (k/λ)(t/λ)^(k-1)                 H = (t/λ)^k
  Gompertz     h = a·exp(bt)                        H = (a/b)(exp(bt) - 1)
  LogLogistic  h = (β/α)(t/α)^(β-1) / (1+(t/α)^β)   H = log(1 + (t/α)^β)
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from core.config import NumericsConfig
from core.utils import as_param_vector

from .base import HazardDistribution


class _ClosedFormHazard(HazardDistribution):
    """Shared plumbing for families parameterized by named scalars."""

    param_names: Tuple[str, ...] = ()

    def __init__(self, *values: Optional[float], numerics: Optional[NumericsConfig] = None):
        self.par = None if any(v is None for v in values) else as_param_vector(values)
        if numerics is not None:
            self.numerics = numerics

    @property
    def has_cum_haz_rate(self) -> bool:
        return True

    def __repr__(self) -> str:
        if self.par is None:
            return f"{type(self).__name__}()"
        args = ", ".join(f"{n}={v:.4g}" for n, v in zip(self.param_names, self.par))
        return f"{type(self).__name__}({args})"


class ExponentialHazard(_ClosedFormHazard):
    """Constant hazard λ."""

    param_names = ("rate",)

    def __init__(self, rate: Optional[float] = None, *, numerics: Optional[NumericsConfig] = None):
        super().__init__(rate, numerics=numerics)

    def rate(self, t, par):
        return np.full_like(t, par[0], dtype=float)

    def cum_haz_rate(self, t, par):
        return par[0] * t

    def _inv_cum_haz(self, targets, par):
        return targets / par[0]


class WeibullHazard(_ClosedFormHazard):
    """Weibull with shape k and scale λ (par order: shape, scale)."""

    param_names = ("shape", "scale")

    def __init__(
        self,
        shape: Optional[float] = None,
        scale: Optional[float] = None,
        *,
        numerics: Optional[NumericsConfig] = None,
    ):
        super().__init__(shape, scale, numerics=numerics)

    def rate(self, t, par):
        k, lam = par[0], par[1]
        return (k / lam) * np.power(t / lam, k - 1.0)

    def cum_haz_rate(self, t, par):
        k, lam = par[0], par[1]
        return np.power(t / lam, k)

    def _inv_cum_haz(self, targets, par):
        k, lam = par[0], par[1]
        return lam * np.power(targets, 1.0 / k)


class GompertzHazard(_ClosedFormHazard):
    """Gompertz hazard a·exp(bt) (par order: a, b)."""

    param_names = ("a", "b")

    def __init__(
        self,
        a: Optional[float] = None,
        b: Optional[float] = None,
        *,
        numerics: Optional[NumericsConfig] = None,
    ):
        super().__init__(a, b, numerics=numerics)

    def rate(self, t, par):
        a, b = par[0], par[1]
        return a * np.exp(b * t)

    def cum_haz_rate(self, t, par):
        a, b = par[0], par[1]
        return (a / b) * np.expm1(b * t)

    def _inv_cum_haz(self, targets, par):
        a, b = par[0], par[1]
        return np.log1p(b * targets / a) / b


class LogLogisticHazard(_ClosedFormHazard):
    """Log-logistic with scale α and shape β (par order: scale, shape)."""

    param_names = ("scale", "shape")

    def __init__(
        self,
        scale: Optional[float] = None,
        shape: Optional[float] = None,
        *,
        numerics: Optional[NumericsConfig] = None,
    ):
        super().__init__(scale, shape, numerics=numerics)

    def rate(self, t, par):
        alpha, beta = par[0], par[1]
        z = np.power(t / alpha, beta)
        return (beta / alpha) * np.power(t / alpha, beta - 1.0) / (1.0 + z)

    def cum_haz_rate(self, t, par):
        alpha, beta = par[0], par[1]
        return np.log1p(np.power(t / alpha, beta))

    def _inv_cum_haz(self, targets, par):
        alpha, beta = par[0], par[1]
        return alpha * np.power(np.expm1(targets), 1.0 / beta)
