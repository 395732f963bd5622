"""
Core package — error taxonomy, configuration, record-table schema, and shared utilities.
No business logic lives here.
"""

from .config import DEFAULT_FIT, DEFAULT_NUMERICS, FitConfig, NumericsConfig
from .errors import (
    ComponentIndexError,
    InvalidRecordTableError,
    LayoutArityError,
    MissingParameterCountError,
    MissingParametersError,
    ParameterLengthError,
    SeriesHazError,
    TypeMismatchError,
)
from .schema import LIFETIME_COLUMNS, EXACT, RIGHT_CENSORED, LEFT_CENSORED
from .utils import require_columns, as_time_array, restore_shape, as_param_vector

__all__ = [
    "DEFAULT_FIT",
    "DEFAULT_NUMERICS",
    "FitConfig",
    "NumericsConfig",
    "ComponentIndexError",
    "InvalidRecordTableError",
    "LayoutArityError",
    "MissingParameterCountError",
    "MissingParametersError",
    "ParameterLengthError",
    "SeriesHazError",
    "TypeMismatchError",
    "LIFETIME_COLUMNS",
    "EXACT",
    "RIGHT_CENSORED",
    "LEFT_CENSORED",
    "require_columns",
    "as_time_array",
    "restore_shape",
    "as_param_vector",
]
