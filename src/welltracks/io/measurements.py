# src/welltracks/io/measurements.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

try:
    import pandas as pd  # type: ignore
except Exception as e:  # pragma: no cover
    raise RuntimeError("pandas is required. pip install pandas") from e

from welltracks.model import Measurement


# Column spellings accepted by the upload format
DEPTH_COLS = ("DEPTH", "Depth", "depth")
CATEGORY_COLS = ("ROCK_COMPOSITION", "Rock Composition", "Rock_Composition", "rock_composition", "category")
VALUE_A_COLS = ("DT", "dt", "value_a")
VALUE_B_COLS = ("GR", "gr", "value_b")


def pick_col(df: "pd.DataFrame", cols: Sequence[str]) -> Optional[str]:
    """
    Return the first matching column name from `cols`, case-insensitive.
    """
    col_map = {str(c).strip().lower(): str(c) for c in df.columns}
    for c in cols:
        key = str(c).strip().lower()
        if key in col_map:
            return col_map[key]
    return None


def _numeric(df: "pd.DataFrame", col: Optional[str]) -> "pd.Series":
    if col is None:
        return pd.Series(0.0, index=df.index, dtype="float64")
    return pd.to_numeric(df[col], errors="coerce").fillna(0.0).astype("float64")


def frame_to_measurements(df: "pd.DataFrame", *, source: str = "<frame>") -> List[Measurement]:
    """
    Coerce a table into Measurements, keeping row order.

    Missing/non-numeric DT/GR cells become 0.0 and a missing category becomes
    "". The depth column itself is required.
    """
    c_depth = pick_col(df, DEPTH_COLS)
    if c_depth is None:
        raise ValueError(f"{source}: missing depth column (one of {list(DEPTH_COLS)}). Found: {list(df.columns)}")
    c_cat = pick_col(df, CATEGORY_COLS)

    depth = _numeric(df, c_depth)
    value_a = _numeric(df, pick_col(df, VALUE_A_COLS))
    value_b = _numeric(df, pick_col(df, VALUE_B_COLS))
    if c_cat is None:
        cat = pd.Series("", index=df.index, dtype="object")
    else:
        cat = df[c_cat].fillna("").astype(str).str.strip()

    return [
        Measurement(depth=float(d), category=str(c), value_a=float(a), value_b=float(b))
        for d, c, a, b in zip(depth.tolist(), cat.tolist(), value_a.tolist(), value_b.tolist())
    ]


EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")


def _read_table(path: Path, *, delimiter: Optional[str] = None) -> "pd.DataFrame":
    # Workbooks: first sheet only, as uploaded from the dashboard
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return pd.read_excel(path, sheet_name=0, dtype=str)
    if delimiter is None:
        return pd.read_csv(path, sep=None, engine="python", comment="#", skip_blank_lines=True, dtype=str)
    return pd.read_csv(path, sep=delimiter, comment="#", skip_blank_lines=True, dtype=str)


def load_measurements(path: Path, *, delimiter: Optional[str] = None) -> List[Measurement]:
    """
    Read an Excel workbook (.xlsx/.xlsm/.xls) or a delimited text export.

    The delimiter of text files is sniffed by pandas unless given.
    A file with no content at all raises ValueError like any other unreadable table.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input not found: {path}")
    try:
        df = _read_table(path, delimiter=delimiter)
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"{path}: no rows or header found") from e
    return frame_to_measurements(df, source=str(path))
