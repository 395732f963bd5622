"""
Series package — compose component distributions into a series system.

  1. layout.py   — flat parameter vector ↔ per-component blocks
  2. system.py   — SeriesSystem: summed hazards, closed-form / numerical cumulative hazard,
                   component extraction and per-component hazards
  3. sampler.py  — n × m matrix of independent component lifetimes
"""

from .layout import ParamLayout, build_param_layout, slice_params, total_params
from .sampler import ComponentSamples, sample_components
from .system import SERIES_ASSUMPTIONS, ComponentHazard, SeriesSystem

__all__ = [
    "ParamLayout",
    "build_param_layout",
    "slice_params",
    "total_params",
    "ComponentSamples",
    "sample_components",
    "SERIES_ASSUMPTIONS",
    "ComponentHazard",
    "SeriesSystem",
]
