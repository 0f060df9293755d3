"""
dataframe.py - pandas interop
-----------------------------
Single responsibility: turn DataFrames into table rows and columns
"""

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd


def _clean_value(value: Any) -> Any:
    """NaN/NaT/None become None, everything else is kept as is"""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def rows_from_dataframe(df: pd.DataFrame) -> list[dict]:
    """One mapping per DataFrame row, keyed by column label"""
    return [
        {column: _clean_value(value) for column, value in record.items()}
        for record in df.to_dict(orient="records")
    ]


def to_rows(data: pd.DataFrame | Iterable[Mapping] | None) -> list[Mapping]:
    """Materialise table input into a list of row mappings"""
    if data is None:
        return []
    if isinstance(data, pd.DataFrame):
        return rows_from_dataframe(data)
    return list(data)


def columns_from_dataframe(
    df: pd.DataFrame,
    total_width: float,
    headers: Mapping[Any, str] | None = None,
    **params: Any,
) -> list[dict]:
    """Column definitions sharing total_width equally between DataFrame columns"""
    headers = headers or {}
    width = total_width / max(1, len(df.columns))
    return [
        {"id": column, "header": headers.get(column, str(column)), "width": width, **params}
        for column in df.columns
    ]
