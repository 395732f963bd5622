"""
Distributions package — the hazard-based distribution interface and its leaf implementations.

  1. base.py      — HazardDistribution: capability set + derived evaluators
  2. dfr.py       — DFRDistribution: wrap a plain hazard function
  3. families.py  — exponential, Weibull, Gompertz, log-logistic
  4. numerics.py  — quadrature and root-finding fallbacks
"""

from .base import HazardDistribution
from .dfr import DFRDistribution
from .families import ExponentialHazard, GompertzHazard, LogLogisticHazard, WeibullHazard
from .numerics import integrate_hazard, invert_cum_haz

__all__ = [
    "HazardDistribution",
    "DFRDistribution",
    "ExponentialHazard",
    "GompertzHazard",
    "LogLogisticHazard",
    "WeibullHazard",
    "integrate_hazard",
    "invert_cum_haz",
]
