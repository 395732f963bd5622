"""
Build canonical (t, delta) lifetime record tables.

delta: 1 = exact failure time, 0 = right-censored, -1 = left-censored.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from core.schema import DELTA_COL, EXACT, LEFT_CENSORED, RIGHT_CENSORED, TIME_COL


def _as_times(times: Iterable[float]) -> np.ndarray:
    if not isinstance(times, (np.ndarray, pd.Series)):
        times = list(times)
    return np.asarray(times, dtype=float)


def _records(times: Iterable[float], delta) -> pd.DataFrame:
    t = _as_times(times)
    d = np.broadcast_to(np.asarray(delta, dtype=int), t.shape)
    return pd.DataFrame({TIME_COL: t, DELTA_COL: np.array(d)})


def make_exact_data(times: Iterable[float]) -> pd.DataFrame:
    return _records(times, EXACT)


def make_censored_data(times: Iterable[float]) -> pd.DataFrame:
    """All rows right-censored."""
    return _records(times, RIGHT_CENSORED)


def make_left_censored_data(times: Iterable[float]) -> pd.DataFrame:
    return _records(times, LEFT_CENSORED)


def make_mixed_data(
    exact_times: Iterable[float],
    censored_times: Iterable[float],
) -> pd.DataFrame:
    """Exact observations followed by right-censored ones."""
    return pd.concat(
        [make_exact_data(exact_times), make_censored_data(censored_times)],
        ignore_index=True,
    )


def right_censor(times: Iterable[float], tau: float) -> pd.DataFrame:
    """
    Type-I right censoring at tau: t = min(T, tau), delta = 1 if T <= tau else 0.
    """
    t = _as_times(times)
    observed = np.minimum(t, tau)
    delta = np.where(t <= tau, EXACT, RIGHT_CENSORED)
    return pd.DataFrame({TIME_COL: observed, DELTA_COL: delta.astype(int)})
