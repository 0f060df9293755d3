"""
pdftable
========

Lays out rows of tabular data on a paginated drawing surface: column widths,
two-pass row measurement, page breaks with header re-emission and lifecycle
hooks for plugins.
"""

__version__ = "1.0.0"

from pdftable.enums import TableEvent
from pdftable.exceptions import (
    ColumnConfigurationError,
    ConfigurationError,
    PdfTableError,
    PluginConfigurationError,
    SurfaceError,
)
from pdftable.layout import CellPosition, Column, LayoutContext, RowMeasurement
from pdftable.table import PdfTable

__all__ = [
    "__version__",
    "TableEvent",
    "PdfTableError",
    "ConfigurationError",
    "ColumnConfigurationError",
    "PluginConfigurationError",
    "SurfaceError",
    "CellPosition",
    "Column",
    "LayoutContext",
    "RowMeasurement",
    "PdfTable",
]
