from __future__ import annotations

from io import BytesIO
from pathlib import PurePath
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ttest_tutor.stats.errors import ParseError

SUPPORTED_SUFFIXES = (".csv", ".txt", ".xlsx", ".xls")


def _to_python(value: Any) -> Any:
    """numpy scalars -> builtins, blank cells -> None."""
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    if isinstance(value, np.generic):
        value = value.item()
        if isinstance(value, float) and np.isnan(value):
            return None
    return value


def read_dataframe(content: bytes, filename: str, sheet_name: str | int = 0) -> pd.DataFrame:
    """Parse CSV/TXT/XLSX bytes into a DataFrame (first sheet for workbooks)."""
    if not content:
        raise ParseError("The uploaded file is empty.")

    suffix = PurePath(filename or "").suffix.lower()
    buffer = BytesIO(content)

    try:
        if suffix == ".csv":
            df = pd.read_csv(buffer)
        elif suffix in (".xlsx", ".xls"):
            df = pd.read_excel(buffer, sheet_name=sheet_name)
        elif suffix == ".txt":
            df = pd.read_csv(buffer, sep=None, engine="python")
        else:
            raise ParseError(
                f"Unsupported file type '{suffix or filename}'. Upload one of: {', '.join(SUPPORTED_SUFFIXES)}."
            )
    except ParseError:
        raise
    except Exception as e:
        raise ParseError(f"Error reading the file: {e}") from e

    return df.dropna(axis=1, how="all")


def _restore_numeric_cells(series: pd.Series) -> pd.Series:
    """
    Typed per cell, not per column: one stray string makes pandas read the
    whole column as text, so numeric-looking strings are turned back into
    numbers and everything else is left as-is.
    """
    if pd.api.types.is_numeric_dtype(series):
        return series

    series = series.astype(object)
    is_text = series.map(lambda v: isinstance(v, str))
    if not is_text.any():
        return series
    coerced = pd.to_numeric(series.where(is_text).str.strip(), errors="coerce")
    return series.where(~(is_text & coerced.notna()), coerced)


def dataframe_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Row-of-records view, column order preserved."""
    df = df.apply(_restore_numeric_cells)
    columns = [str(c) for c in df.columns]
    return [
        {col: _to_python(v) for col, v in zip(columns, row)}
        for row in df.itertuples(index=False, name=None)
    ]


def load_records(content: bytes, filename: str, sheet_name: str | int = 0) -> List[Dict[str, Any]]:
    df = read_dataframe(content, filename, sheet_name=sheet_name)
    return dataframe_to_records(df)
