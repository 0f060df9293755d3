"""Alternating row shading."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pdftable.utils.colors import RGB, hex_to_rgb

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from pdftable.layout.measure import RowMeasurement
    from pdftable.table import PdfTable


class RowShader:
    """Shades body rows with two alternating colours.

    A row about to trigger a page break is shaded from the page-added hook,
    once the cursor sits on the new page, instead of from the row hook.

    Args:
        shade1: Colour of even rows
        shade2: Colour of odd rows
        x: Left edge of the shading, defaults to the surface left margin
        width: Shading width, defaults to the visible table width
        offset_header: Shade below the header that is redrawn on every new page
    """

    id = "rowshader"

    def __init__(
        self,
        shade1: str | RGB = "#DAE6F2",
        shade2: str | RGB = "#BACEE6",
        x: float | None = None,
        width: float | None = None,
        offset_header: bool = False,
    ):
        self.shade1 = hex_to_rgb(shade1)
        self.shade2 = hex_to_rgb(shade2)
        self.x = x
        self.width = width
        self.offset_header = offset_header
        self._current_row_height = 0
        self._shading_count = 0
        self._header_height = 0
        self._in_header = False

    def configure(self, table: PdfTable) -> None:
        self._current_row_height = 0
        self._shading_count = 0
        self._header_height = 0
        self._in_header = False
        (
            table.on_row_add(self.on_row_add)
            .on_page_added(self.on_page_added)
            .on_header_add(self.on_header_add)
            .on_header_height_calculated(self.on_header_height_calculated)
            .on_header_added(self.on_header_added)
        )

    def on_row_add(
        self, table: PdfTable, row: Mapping, measurement: RowMeasurement
    ) -> None:
        self._current_row_height = measurement.height
        # the page-added hook shades this row once the break happened
        if not table.row_fits(self._current_row_height):
            return
        self._shade(table, table.context.y)

    def on_page_added(self, table: PdfTable) -> None:
        # the header moved to a new page, no body row to shade yet
        if self._in_header:
            return
        y = table.context.y
        if self.offset_header:
            y += self._header_height + table.row_spacing
        self._shade(table, y)

    def on_header_add(self, table: PdfTable, header_row: Mapping) -> None:
        self._in_header = True

    def on_header_height_calculated(
        self, table: PdfTable, header_row: Mapping, measurement: RowMeasurement
    ) -> None:
        self._header_height = measurement.height

    def on_header_added(
        self, table: PdfTable, header_row: Mapping, measurement: RowMeasurement
    ) -> None:
        self._in_header = False

    def _shade(self, table: PdfTable, y: float) -> None:
        shade = self.shade1 if self._shading_count % 2 == 0 else self.shade2
        x = table.surface.left_margin if self.x is None else self.x
        width = table.get_width() if self.width is None else self.width
        table.surface.fill_rect(x, y, width, self._current_row_height, shade)
        self._shading_count += 1
