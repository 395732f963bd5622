from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

import numpy as np
import pandas as pd

ArrayLike = Union[float, Iterable[float], np.ndarray]


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def as_time_array(t: ArrayLike) -> Tuple[np.ndarray, bool]:
    """Coerce a scalar or sequence of times to a 1-D float array; also report whether it was scalar."""
    arr = np.asarray(t, dtype=float)
    return np.atleast_1d(arr), arr.ndim == 0


def restore_shape(values: np.ndarray, scalar: bool):
    """Inverse of as_time_array: unwrap a length-1 result for scalar input."""
    values = np.asarray(values, dtype=float)
    if scalar:
        return float(values.reshape(-1)[0])
    return values


def as_param_vector(par: Optional[ArrayLike]) -> Optional[np.ndarray]:
    """Flat float copy of a parameter vector (None passes through)."""
    if par is None:
        return None
    return np.array(par, dtype=float).reshape(-1)


def resolve_rng(rng=None) -> np.random.Generator:
    """Accept None, an integer seed, or an existing Generator."""
    return np.random.default_rng(rng)
