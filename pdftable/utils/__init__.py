"""
utils package
-------------
Logging, colour parsing and pandas helpers
"""

from pdftable.utils.logging import get_logger, configure_logging, LogLevel
from pdftable.utils.colors import hex_to_rgb
from pdftable.utils.dataframe import (
    columns_from_dataframe,
    rows_from_dataframe,
    to_rows,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "LogLevel",
    "hex_to_rgb",
    "columns_from_dataframe",
    "rows_from_dataframe",
    "to_rows",
]
