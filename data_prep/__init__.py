"""
Data preparation — building, loading and validating (t, delta) lifetime record tables.
"""

from .loader import load_lifetime_csv
from .records import (
    make_censored_data,
    make_exact_data,
    make_left_censored_data,
    make_mixed_data,
    right_censor,
)
from .validators import ValidationResult, validate_lifetime_data

__all__ = [
    "load_lifetime_csv",
    "make_censored_data",
    "make_exact_data",
    "make_left_censored_data",
    "make_mixed_data",
    "right_censor",
    "ValidationResult",
    "validate_lifetime_data",
]
