from __future__ import annotations

import pandas as pd

from core.schema import DELTA_COL, TIME_COL
from core.utils import require_columns


def load_lifetime_csv(
    path: str,
    *,
    time_col: str = TIME_COL,
    delta_col: str = DELTA_COL,
) -> pd.DataFrame:
    """
    Load a lifetime record table from CSV, renaming the time / censoring
    columns to the canonical (t, delta).
    """
    df = pd.read_csv(path)
    require_columns(df, [time_col, delta_col])
    out = df[[time_col, delta_col]].rename(columns={time_col: TIME_COL, delta_col: DELTA_COL})
    return out.reset_index(drop=True)
