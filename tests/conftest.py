"""
Pytest bootstrap for the flat package layout.

The packages (core, distributions, series, inference, data_prep) live at
the repository root; make sure the root is importable even when the
project has not been installed.
"""
from __future__ import annotations

import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

import pytest  # noqa: E402

from _factories import make_exp_series, make_mixed_series, make_weibull_series  # noqa: E402


@pytest.fixture
def exp_series():
    return make_exp_series((0.1, 0.2, 0.3))


@pytest.fixture
def weibull_series():
    return make_weibull_series(shapes=(2.0, 1.5), scales=(100.0, 200.0))


@pytest.fixture
def mixed_series():
    return make_mixed_series()
