"""
Data quality validation for lifetime record tables before likelihood evaluation.

Catches problems early:
- Missing t / delta columns
- Non-numeric, missing or negative times
- Censoring codes outside {1, 0, -1}
- Tables with no exact observations
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np
import pandas as pd

from core.schema import CENSORING_CODES, DELTA_COL, EXACT, LIFETIME_COLUMNS, TIME_COL


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a record table."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_lifetime_data(
    data: pd.DataFrame,
    *,
    columns: tuple = LIFETIME_COLUMNS,
) -> ValidationResult:
    """
    Run all validation checks on a (t, delta) record table.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Schema checks ---
    missing = [c for c in columns if c not in data.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result  # can't continue without columns

    n = len(data)
    if n == 0:
        result.errors.append("Record table is empty (0 rows).")
        return result

    # --- Times ---
    times = pd.to_numeric(data[TIME_COL], errors="coerce")
    n_null = int(times.isna().sum())
    if n_null > 0:
        result.errors.append(f"{n_null} rows have null/non-numeric {TIME_COL}.")
    n_neg = int((times < 0).sum())
    if n_neg > 0:
        result.errors.append(f"{n_neg} rows have negative {TIME_COL}.")
    n_inf = int(np.isinf(times.to_numpy(dtype=float)).sum())
    if n_inf > 0:
        result.warnings.append(f"{n_inf} rows have infinite {TIME_COL}.")

    # --- Censoring indicator ---
    delta = pd.to_numeric(data[DELTA_COL], errors="coerce")
    n_bad = int((~delta.isin(list(CENSORING_CODES))).sum())
    if n_bad > 0:
        result.errors.append(
            f"{n_bad} rows have {DELTA_COL} outside {sorted(CENSORING_CODES)}."
        )
    elif not (delta == EXACT).any():
        result.warnings.append(
            "No exact observations — likelihood is driven by censoring alone."
        )

    n_dup = int(data[list(columns)].duplicated().sum())
    if n_dup > 0:
        result.warnings.append(f"{n_dup} duplicate (t, delta) rows found.")

    return result
