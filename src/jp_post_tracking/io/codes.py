# src/jp_post_tracking/io/codes.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List, Union

import numpy as np
import pandas as pd

from jp_post_tracking.io.schema import INPUT_CODE_COLUMN

_NON_DIGIT = re.compile(r"\D", re.UNICODE)


def remove_non_numeric_chars(value: str) -> str:
    """お問い合わせ番号から数値以外を除去する ("1234-5678-9012" -> "123456789012")."""
    return _NON_DIGIT.sub("", value or "")


def _is_blank(val: Any) -> bool:
    """True if value is None/NaN/empty/“nan”/“none” (case-insensitive)."""
    if val is None:
        return True
    if isinstance(val, float) and np.isnan(val):
        return True
    s = str(val).strip()
    return s == "" or s.lower() in {"nan", "none"}


def _read_frame(path: Path) -> pd.DataFrame:
    # read as text so leading zeros and long numbers survive
    if path.suffix.lower() == ".csv":
        return pd.read_csv(path, dtype=str)
    return pd.read_excel(path, dtype=str, engine="openpyxl")


def read_tracking_codes(path: Union[str, Path], column: str = INPUT_CODE_COLUMN) -> List[str]:
    """
    Read tracking codes from one column of an .xlsx or .csv file.

    Blank cells are skipped; every code is reduced to its digits and codes
    with no digits at all are dropped. Order is preserved.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    df = _read_frame(p)
    if column not in df.columns:
        raise KeyError(f"Column not found in {p.name}: {column}")

    codes: List[str] = []
    for raw in df[column].tolist():
        if _is_blank(raw):
            continue
        code = remove_non_numeric_chars(str(raw))
        if code:
            codes.append(code)
    return codes
