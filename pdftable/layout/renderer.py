"""Pagination and row drawing (second pass of the layout)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pdftable.enums import BorderSide, PaddingDirection, TableEvent, VerticalAlign
from pdftable.layout.measure import RowMeasurement, is_empty
from pdftable.layout.padding import get_padding_value
from pdftable.utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from pdftable.layout.columns import Column
    from pdftable.surface.base import DrawingSurface
    from pdftable.table import PdfTable

logger = get_logger()


@dataclass
class LayoutContext:
    """Pagination state shared by the renderer and hook listeners.

    Listeners may read it; only the table and its renderer move it.
    """

    x: float = 0
    y: float = 0
    page_index: int = 0

    def sync(self, surface: DrawingSurface) -> None:
        self.x = surface.left_margin
        self.y = surface.get_y()


@dataclass(frozen=True, slots=True)
class CellPosition:
    """Where a cell is drawn, given to content functions at draw time"""

    x: float
    y: float
    padding_left: float = 0
    padding_top: float = 0


class RowRenderer:
    """Draws measured rows, adding pages when a row does not fit."""

    def __init__(self, table: PdfTable):
        self.table = table

    @property
    def surface(self) -> DrawingSurface:
        return self.table.surface

    @property
    def context(self) -> LayoutContext:
        return self.table.context

    def page_break_point(self) -> float:
        """Lowest y a row may reach on the current page"""
        surface = self.surface
        return surface.page_height - surface.bottom_margin - self.table.bottom_margin

    def fits(self, height: float) -> bool:
        return self.context.y + height <= self.page_break_point()

    def move_to(self, y: float) -> None:
        self.context.y = y
        self.surface.set_y(y)

    def add_row(
        self, row: Mapping, measurement: RowMeasurement, is_header: bool = False
    ) -> None:
        if not self.fits(measurement.height):
            self._break_page(is_header)

        row_top = self.context.y
        self.context.x = self.surface.left_margin

        for column in self.table.get_columns():
            if column.has_fill(is_header):
                self._add_cell_background(column, measurement, row_top)
            border = column.get_border(is_header)
            if border:
                self._add_cell_border(column, measurement, row_top, border)
            self._add_cell(column, row, measurement, row_top, is_header)
            self.context.x += column.width

        self.move_to(row_top + measurement.height)
        self.move_to(self.context.y + self.table.row_spacing)

    def _break_page(self, is_header: bool) -> None:
        table = self.table
        logger.debug(
            f"Row does not fit at y={self.context.y:.1f} "
            f"(break point {self.page_break_point():.1f}), page {self.context.page_index}"
        )
        table.emit(TableEvent.PAGE_ADD)
        if table.new_page_fn is None:
            return

        table.new_page_fn(table)
        self.context.sync(self.surface)
        self.context.page_index += 1
        table.emit(TableEvent.PAGE_ADDED)

        if not is_header and table.show_headers and table.repeat_header:
            table.add_header()

    def _add_cell_background(
        self, column: Column, measurement: RowMeasurement, row_top: float
    ) -> None:
        self.surface.fill_rect(
            self.context.x, row_top, column.width, measurement.height
        )

    def _add_cell_border(
        self,
        column: Column,
        measurement: RowMeasurement,
        row_top: float,
        border: frozenset[BorderSide],
    ) -> None:
        x, y = self.context.x, row_top
        right, bottom = x + column.width, y + measurement.height

        if BorderSide.LEFT in border:
            self.surface.line(x, y, x, bottom)
        if BorderSide.TOP in border:
            self.surface.line(x, y, right, y)
        if BorderSide.BOTTOM in border:
            self.surface.line(x, bottom, right, bottom)
        if BorderSide.RIGHT in border:
            self.surface.line(right, y, right, bottom)

    def _add_cell(
        self,
        column: Column,
        row: Mapping,
        measurement: RowMeasurement,
        row_top: float,
        is_header: bool,
    ) -> None:
        padding_left = get_padding_value(PaddingDirection.LEFT, column.padding)
        padding_top = get_padding_value(PaddingDirection.TOP, column.padding)
        width = column.width - get_padding_value(
            PaddingDirection.HORIZONTAL, column.padding
        )

        content = measurement.content.get(column.id)
        content_fn = column.get_content_fn(is_header)
        if content_fn is not None and not column.cache:
            position = CellPosition(self.context.x, row_top, padding_left, padding_top)
            content = content_fn(self.table, row, True, column, position)

        y = row_top + padding_top
        free_height = measurement.height - measurement.content_height[column.id]
        if column.valign is VerticalAlign.CENTER:
            y += free_height / 2
        elif column.valign is VerticalAlign.BOTTOM:
            y += free_height

        if is_empty(content):
            return
        self.surface.draw_text(
            str(content),
            self.context.x + padding_left,
            y,
            width,
            measurement.height,
            column.text_options(),
        )
