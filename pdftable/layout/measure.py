"""Row height measurement (first pass of the layout)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pdftable.enums import PaddingDirection
from pdftable.layout.padding import get_padding_value

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from pdftable.layout.columns import Column
    from pdftable.table import PdfTable

EMPTY_CONTENT_HEIGHT = 1


@dataclass
class RowMeasurement:
    """Content and heights computed for one row before it is drawn"""

    content: dict[Any, Any] = field(default_factory=dict)
    content_height: dict[Any, float] = field(default_factory=dict)
    height: float = 0


def is_empty(content: Any) -> bool:
    return content is None or content == ""


class RowMeasurer:
    """Computes cell contents and heights for rows and header rows."""

    def __init__(self, table: PdfTable):
        self.table = table

    def measure_rows(self, rows: Sequence[Mapping]) -> list[RowMeasurement]:
        """Measure a batch, results are aligned with the row indexes"""
        columns = self.table.get_columns()
        return [self._measure(row, columns, is_header=False) for row in rows]

    def measure_header(self, header_row: Mapping) -> RowMeasurement:
        return self._measure(header_row, self.table.get_columns(), is_header=True)

    def _measure(
        self, row: Mapping, columns: list[Column], is_header: bool
    ) -> RowMeasurement:
        measurement = RowMeasurement()
        for column in columns:
            content = self.produce_content(row, column, is_header)
            height = self._content_height(content, column)
            min_height = column.min_height(is_header)
            if min_height is not None and height < min_height:
                height = min_height

            measurement.content[column.id] = content
            measurement.content_height[column.id] = height
            measurement.height = max(measurement.height, height)
        return measurement

    def produce_content(self, row: Mapping, column: Column, is_header: bool) -> Any:
        content_fn = column.get_content_fn(is_header)
        if content_fn is not None:
            return content_fn(self.table, row, False, column, None)
        return row.get(column.id)

    def _content_height(self, content: Any, column: Column) -> float:
        if is_empty(content):
            return EMPTY_CONTENT_HEIGHT
        width = column.width - get_padding_value(
            PaddingDirection.HORIZONTAL, column.padding
        )
        return self.table.surface.text_height(
            str(content), width, column.text_options()
        )
