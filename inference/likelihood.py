"""
Log-likelihood of a hazard-based distribution over censored lifetime records.

For records (t_i, delta_i):

    delta =  1 (exact)          log h(t) - H(t)
    delta =  0 (right-censored) -H(t)
    delta = -1 (left-censored)  log(1 - exp(-H(t)))

Only the distribution's hazard / cumulative-hazard evaluators and a flat
parameter vector are used, so the same code serves leaves and composed
systems. Invalid parameter regions surface as NaN or -inf; nothing is
clamped here.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

from core.config import DEFAULT_FIT, FitConfig
from core.errors import InvalidRecordTableError
from core.schema import DELTA_COL, EXACT, LEFT_CENSORED, RIGHT_CENSORED, TIME_COL
from core.utils import ArrayLike
from data_prep.validators import validate_lifetime_data
from distributions.base import HazardDistribution

from .numdiff import central_gradient, symmetric_hessian


def prepare_records(data: pd.DataFrame) -> Tuple[np.ndarray, np.ndarray]:
    """Validate a (t, delta) table and return it as (times, codes) arrays."""
    result = validate_lifetime_data(data)
    if not result.is_valid:
        raise InvalidRecordTableError(result.summary())
    t = pd.to_numeric(data[TIME_COL]).to_numpy(dtype=float)
    delta = pd.to_numeric(data[DELTA_COL]).to_numpy().astype(int)
    return t, delta


def loglik_arrays(
    dist: HazardDistribution,
    t: np.ndarray,
    delta: np.ndarray,
    par: Optional[ArrayLike] = None,
) -> float:
    exact = delta == EXACT
    right = delta == RIGHT_CENSORED
    left = delta == LEFT_CENSORED

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        H = np.asarray(dist.cum_haz(t, par=par), dtype=float)
        ll = 0.0
        if exact.any():
            h = np.asarray(dist.hazard(t[exact], par=par), dtype=float)
            ll += np.sum(np.log(h)) - np.sum(H[exact])
        if right.any():
            ll -= np.sum(H[right])
        if left.any():
            ll += np.sum(np.log(-np.expm1(-H[left])))
    return float(ll)


def loglik(
    dist: HazardDistribution,
    data: pd.DataFrame,
    par: Optional[ArrayLike] = None,
) -> float:
    """
    Log-likelihood of `data` under `dist`.

    Parameters
    ----------
    dist : HazardDistribution
        Leaf distribution or series system.
    data : pd.DataFrame
        Record table with columns t and delta (1 exact, 0 right, -1 left censored).
    par : array-like, optional
        Flat parameter vector; defaults to the distribution's own.
    """
    t, delta = prepare_records(data)
    return loglik_arrays(dist, t, delta, par)


def score(
    dist: HazardDistribution,
    data: pd.DataFrame,
    par: Optional[ArrayLike] = None,
    config: Optional[FitConfig] = None,
) -> np.ndarray:
    """Gradient of the log-likelihood in the flat parameter vector (central differences)."""
    cfg = config or DEFAULT_FIT
    t, delta = prepare_records(data)
    x = dist.resolve_params(par)
    return central_gradient(lambda p: loglik_arrays(dist, t, delta, p), x, cfg.score_step)


def hess_loglik(
    dist: HazardDistribution,
    data: pd.DataFrame,
    par: Optional[ArrayLike] = None,
    config: Optional[FitConfig] = None,
) -> np.ndarray:
    """Hessian of the log-likelihood in the flat parameter vector."""
    cfg = config or DEFAULT_FIT
    t, delta = prepare_records(data)
    x = dist.resolve_params(par)
    return symmetric_hessian(
        lambda p: loglik_arrays(dist, t, delta, p), x, cfg.score_step, cfg.hess_step
    )
