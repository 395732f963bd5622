from __future__ import annotations

from typing import Callable

import numpy as np


def _step(x: float, rel_step: float) -> float:
    return rel_step * max(abs(x), 1.0)


def central_gradient(f: Callable[[np.ndarray], float], x: np.ndarray, rel_step: float) -> np.ndarray:
    """Central-difference gradient of a scalar function."""
    x = np.array(x, dtype=float)
    g = np.empty(len(x), dtype=float)
    for k in range(len(x)):
        h = _step(x[k], rel_step)
        xp, xm = x.copy(), x.copy()
        xp[k] += h
        xm[k] -= h
        g[k] = (f(xp) - f(xm)) / (2.0 * h)
    return g


def symmetric_hessian(
    f: Callable[[np.ndarray], float],
    x: np.ndarray,
    grad_step: float,
    hess_step: float,
) -> np.ndarray:
    """Central differences of the central-difference gradient, symmetrized."""
    x = np.array(x, dtype=float)
    n = len(x)
    jac = np.empty((n, n), dtype=float)
    for k in range(n):
        h = _step(x[k], hess_step)
        xp, xm = x.copy(), x.copy()
        xp[k] += h
        xm[k] -= h
        jac[:, k] = (central_gradient(f, xp, grad_step) - central_gradient(f, xm, grad_step)) / (2.0 * h)
    return 0.5 * (jac + jac.T)
