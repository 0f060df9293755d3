"""Layout engine: padding, columns, measurement and row rendering."""

from pdftable.layout.padding import get_padding_value
from pdftable.layout.columns import Column, ColumnRegistry
from pdftable.layout.measure import RowMeasurement, RowMeasurer
from pdftable.layout.renderer import CellPosition, LayoutContext, RowRenderer

__all__ = [
    "get_padding_value",
    "Column",
    "ColumnRegistry",
    "RowMeasurement",
    "RowMeasurer",
    "CellPosition",
    "LayoutContext",
    "RowRenderer",
]
