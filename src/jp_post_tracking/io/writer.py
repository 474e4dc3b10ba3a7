from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd


def write_results(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    """Write the results table as .csv or .xlsx depending on the suffix."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    if p.suffix.lower() == ".csv":
        df.to_csv(p, index=False, encoding="utf-8")
    else:
        df.to_excel(p, index=False, engine="openpyxl")
    return p
