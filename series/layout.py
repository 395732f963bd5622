"""
Parameter layout — maps one flat parameter vector onto per-component blocks.

For n_par = (2, 1, 3) the layout is (range(0, 2), range(2, 3), range(3, 6)):
component j owns a contiguous block that starts right after component j-1's.
The layout depends only on n_par and component order, so a fitted flat
vector always maps back to the same components.
"""

from __future__ import annotations

import numbers
from typing import Sequence, Tuple

import numpy as np

ParamLayout = Tuple[range, ...]


def build_param_layout(n_par: Sequence[int]) -> ParamLayout:
    """Partition [0, sum(n_par)) into consecutive blocks of the given lengths."""
    layout = []
    start = 0
    for j, n in enumerate(n_par, start=1):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise ValueError(f"Parameter count for component {j} must be an integer, got {n!r}")
        if n < 0:
            raise ValueError(f"Parameter count for component {j} must be non-negative, got {n}")
        layout.append(range(start, start + int(n)))
        start += int(n)
    return tuple(layout)


def total_params(layout: ParamLayout) -> int:
    return layout[-1].stop if layout else 0


def slice_params(par: np.ndarray, block: range) -> np.ndarray:
    """Component-local view of the flat vector."""
    return par[block.start:block.stop]
