from __future__ import annotations

from typing import Dict, Tuple

# Canonical lifetime record table: one row per observed unit.
TIME_COL = "t"
DELTA_COL = "delta"
LIFETIME_COLUMNS: Tuple[str, ...] = (TIME_COL, DELTA_COL)

# Censoring indicator convention.
EXACT = 1
RIGHT_CENSORED = 0
LEFT_CENSORED = -1

CENSORING_CODES: Dict[int, str] = {
    EXACT: "exact",
    RIGHT_CENSORED: "right-censored",
    LEFT_CENSORED: "left-censored",
}
