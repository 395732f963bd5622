"""
Interface for failure-time distributions defined by their hazard rate.

Leaf families and composed systems implement the same capability set:

    rate(t, par)          hazard rate at each time (required)
    cum_haz_rate(t, par)  closed-form cumulative hazard (optional, see has_cum_haz_rate)
    par                   current parameter vector, or None
    sample(n, par, rng)   n independent lifetimes

Everything else (survival, CDF, density, quantiles, sampling) is derived
here from those capabilities, falling back to numerical integration or
root finding where no closed form is available.

Evaluation never writes to the distribution: each call resolves its own
parameter vector and works on fresh arrays. Concurrent evaluation of one
instance is therefore safe as long as the rate / cum_haz_rate
implementations are stateless.
"""

from __future__ import annotations

import copy
from typing import Optional

import numpy as np

from core.config import DEFAULT_NUMERICS, NumericsConfig
from core.errors import MissingParametersError
from core.utils import ArrayLike, as_param_vector, as_time_array, resolve_rng, restore_shape

from .numerics import integrate_hazard, invert_cum_haz


class HazardDistribution:
    """Interface for hazard-based lifetime distributions."""

    par: Optional[np.ndarray] = None
    numerics: NumericsConfig = DEFAULT_NUMERICS

    # ----- capability set -----

    def rate(self, t: np.ndarray, par: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    @property
    def has_cum_haz_rate(self) -> bool:
        """True when cum_haz_rate is a closed form."""
        return False

    def cum_haz_rate(self, t: np.ndarray, par: np.ndarray) -> np.ndarray:
        raise NotImplementedError(
            f"{type(self).__name__} has no closed-form cumulative hazard"
        )

    def sample(self, n: int, par: Optional[ArrayLike] = None, rng=None) -> np.ndarray:
        """
        Draw n lifetimes by inverse transform: T = H^{-1}(E) with E ~ Exp(1).
        """
        par = self.resolve_params(par)
        e = resolve_rng(rng).exponential(1.0, size=int(n))
        return self._inv_cum_haz(e, par)

    # ----- parameters -----

    def params(self) -> Optional[np.ndarray]:
        return None if self.par is None else self.par.copy()

    @property
    def n_params(self) -> Optional[int]:
        return None if self.par is None else len(self.par)

    def with_params(self, par: ArrayLike) -> "HazardDistribution":
        """Detached copy of this distribution carrying `par`."""
        clone = copy.deepcopy(self)
        clone.par = clone._check_par(as_param_vector(par))
        return clone

    def _check_par(self, par: np.ndarray) -> np.ndarray:
        return par

    def resolve_params(self, par: Optional[ArrayLike] = None) -> np.ndarray:
        """Explicit `par` if given, else the stored parameters; checked and copied."""
        if par is None:
            par = self.par
        if par is None:
            raise MissingParametersError(
                f"Parameters required: pass 'par' or set them on the {type(self).__name__}"
            )
        return self._check_par(as_param_vector(par))

    # ----- derived evaluators -----

    def _rate_values(self, t: np.ndarray, par: np.ndarray) -> np.ndarray:
        return np.array(np.broadcast_to(np.asarray(self.rate(t, par), dtype=float), t.shape))

    def _cum_haz_values(self, t: np.ndarray, par: np.ndarray) -> np.ndarray:
        if self.has_cum_haz_rate:
            return np.array(
                np.broadcast_to(np.asarray(self.cum_haz_rate(t, par), dtype=float), t.shape)
            )
        return integrate_hazard(self.rate, t, par, self.numerics)

    def _inv_cum_haz(self, targets: np.ndarray, par: np.ndarray) -> np.ndarray:
        return invert_cum_haz(self._cum_haz_values, targets, par, self.numerics)

    def hazard(self, t: ArrayLike, par: Optional[ArrayLike] = None):
        """Hazard rate h(t)."""
        par = self.resolve_params(par)
        arr, scalar = as_time_array(t)
        return restore_shape(self._rate_values(arr, par), scalar)

    def cum_haz(self, t: ArrayLike, par: Optional[ArrayLike] = None):
        """Cumulative hazard H(t), closed form when available, else by quadrature."""
        par = self.resolve_params(par)
        arr, scalar = as_time_array(t)
        return restore_shape(self._cum_haz_values(arr, par), scalar)

    def surv(self, t: ArrayLike, par: Optional[ArrayLike] = None):
        """Survival S(t) = exp(-H(t))."""
        par = self.resolve_params(par)
        arr, scalar = as_time_array(t)
        return restore_shape(np.exp(-self._cum_haz_values(arr, par)), scalar)

    def cdf(self, t: ArrayLike, par: Optional[ArrayLike] = None):
        """F(t) = 1 - S(t)."""
        par = self.resolve_params(par)
        arr, scalar = as_time_array(t)
        return restore_shape(-np.expm1(-self._cum_haz_values(arr, par)), scalar)

    def density(self, t: ArrayLike, par: Optional[ArrayLike] = None):
        """f(t) = h(t) S(t)."""
        par = self.resolve_params(par)
        arr, scalar = as_time_array(t)
        h = self._rate_values(arr, par)
        return restore_shape(h * np.exp(-self._cum_haz_values(arr, par)), scalar)

    def inv_cdf(self, p: ArrayLike, par: Optional[ArrayLike] = None):
        """Quantile function: t such that F(t) = p."""
        par = self.resolve_params(par)
        arr, scalar = as_time_array(p)
        with np.errstate(invalid="ignore", divide="ignore"):
            targets = -np.log1p(-arr)
        return restore_shape(self._inv_cum_haz(targets, par), scalar)

    def __repr__(self) -> str:
        par = "unknown" if self.par is None else np.array2string(self.par, precision=4)
        return f"{type(self).__name__}(par={par})"
