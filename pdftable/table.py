"""Table controller: columns, hooks, plugins and the body/header passes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pdftable import config
from pdftable.enums import TableEvent
from pdftable.exceptions import PluginConfigurationError
from pdftable.hooks import HookPipeline, Listener
from pdftable.layout.columns import Column, ColumnRegistry
from pdftable.layout.measure import RowMeasurer
from pdftable.layout.renderer import LayoutContext, RowRenderer
from pdftable.surface.base import DrawingSurface
from pdftable.utils.dataframe import to_rows
from pdftable.utils.logging import get_logger

logger = get_logger()


class PdfTable:
    """Lays out rows of data as a table on a paginated drawing surface.

    Args:
        surface: Drawing surface the table is drawn on
        min_row_height: Number of surface lines added after each row
        bottom_margin: Space kept free above the surface bottom margin
        show_headers: Draw the header row at the start of add_body
        repeat_header: Draw the header again after each page break of add_body
        columns_defaults: Parameters applied to every column added afterwards
        new_page_fn: Called with the table to advance the surface to a new page
    """

    def __init__(
        self,
        surface: DrawingSurface,
        *,
        min_row_height: float | None = None,
        bottom_margin: float | None = None,
        show_headers: bool | None = None,
        repeat_header: bool | None = None,
        columns_defaults: Mapping[str, Any] | None = None,
        new_page_fn: Callable[[PdfTable], None] | None = None,
    ):
        self.surface = surface
        self.min_row_height = (
            config.MIN_ROW_HEIGHT if min_row_height is None else min_row_height
        )
        self.bottom_margin = (
            config.BOTTOM_MARGIN if bottom_margin is None else bottom_margin
        )
        self.show_headers = (
            config.SHOW_HEADERS if show_headers is None else bool(show_headers)
        )
        self.repeat_header = (
            config.REPEAT_HEADER if repeat_header is None else bool(repeat_header)
        )
        self.new_page_fn = new_page_fn

        self.registry = ColumnRegistry()
        self.registry.set_defaults(columns_defaults)
        self.hooks = HookPipeline()
        self.plugins: list[Any] = []
        self.context = LayoutContext()
        self.measurer = RowMeasurer(self)
        self.renderer = RowRenderer(self)
        self.last_header_height: float = 0

    # ---------- Hooks ----------
    def emit(self, event: TableEvent, *payload) -> None:
        self.hooks.emit(event, self, *payload)

    def on(self, event: TableEvent | str, fn: Listener) -> PdfTable:
        self.hooks.subscribe(event, fn)
        return self

    def on_body_add(self, fn: Listener) -> PdfTable:
        """Before data rows are added: fn(table, rows)"""
        return self.on(TableEvent.BODY_ADD, fn)

    def on_body_added(self, fn: Listener) -> PdfTable:
        """After data rows are added: fn(table, rows)"""
        return self.on(TableEvent.BODY_ADDED, fn)

    def on_row_add(self, fn: Listener) -> PdfTable:
        """Before a row is drawn, page break not yet decided: fn(table, row, measurement)"""
        return self.on(TableEvent.ROW_ADD, fn)

    def on_row_added(self, fn: Listener) -> PdfTable:
        """After a row is drawn: fn(table, row, measurement)"""
        return self.on(TableEvent.ROW_ADDED, fn)

    def on_header_add(self, fn: Listener) -> PdfTable:
        """Before the header row is measured and drawn: fn(table, header_row)"""
        return self.on(TableEvent.HEADER_ADD, fn)

    def on_header_added(self, fn: Listener) -> PdfTable:
        """After the header row is drawn: fn(table, header_row, measurement)"""
        return self.on(TableEvent.HEADER_ADDED, fn)

    def on_page_add(self, fn: Listener) -> PdfTable:
        """A row does not fit and a page is about to be added: fn(table)"""
        return self.on(TableEvent.PAGE_ADD, fn)

    def on_page_added(self, fn: Listener) -> PdfTable:
        """A page was added, the cursor is at its top: fn(table)"""
        return self.on(TableEvent.PAGE_ADDED, fn)

    def on_row_height_calculate(self, fn: Listener) -> PdfTable:
        """Before all data rows are measured: fn(table, rows)"""
        return self.on(TableEvent.ROW_HEIGHT_CALCULATE, fn)

    def on_row_height_calculated(self, fn: Listener) -> PdfTable:
        """After all data rows are measured: fn(table, rows, measurements)"""
        return self.on(TableEvent.ROW_HEIGHT_CALCULATED, fn)

    def on_header_height_calculate(self, fn: Listener) -> PdfTable:
        """Before the header row is measured: fn(table, header_row)"""
        return self.on(TableEvent.HEADER_HEIGHT_CALCULATE, fn)

    def on_header_height_calculated(self, fn: Listener) -> PdfTable:
        """After the header row is measured: fn(table, header_row, measurement)"""
        return self.on(TableEvent.HEADER_HEIGHT_CALCULATED, fn)

    def on_column_width_changed(self, fn: Listener) -> PdfTable:
        """After a column width is set: fn(table, column)"""
        return self.on(TableEvent.COLUMN_WIDTH_CHANGED, fn)

    def set_new_page_fn(self, fn: Callable[[PdfTable], None] | None) -> PdfTable:
        self.new_page_fn = fn
        return self

    # ---------- Plugins ----------
    def add_plugin(self, plugin) -> PdfTable:
        """Register a plugin and let it subscribe to hooks through configure()"""
        configure = getattr(plugin, "configure", None)
        if plugin is None or not callable(configure):
            raise PluginConfigurationError(getattr(plugin, "id", None))
        self.plugins.append(plugin)
        with self.hooks.owned_by(plugin):
            configure(self)
        logger.debug(f"Plugin [{getattr(plugin, 'id', None)}] registered")
        return self

    def get_plugin(self, plugin_id) -> Any | None:
        return next(
            (p for p in self.plugins if getattr(p, "id", None) == plugin_id), None
        )

    def remove_plugin(self, plugin_id) -> PdfTable:
        """Remove every plugin with this id along with its hook subscriptions"""
        kept = []
        for plugin in self.plugins:
            if getattr(plugin, "id", None) == plugin_id:
                removed = self.hooks.remove_owner(plugin)
                logger.debug(f"Plugin [{plugin_id}] removed with {removed} listeners")
            else:
                kept.append(plugin)
        self.plugins = kept
        return self

    # ---------- Settings ----------
    def set_show_headers(self, show: bool) -> PdfTable:
        self.show_headers = bool(show)
        return self

    def set_repeat_header(self, repeat: bool) -> PdfTable:
        self.repeat_header = bool(repeat)
        return self

    @property
    def row_spacing(self) -> float:
        """Vertical space added after every row"""
        return self.min_row_height * self.surface.line_height

    def row_fits(self, height: float) -> bool:
        """True when a row of this height fits at the current cursor"""
        return self.renderer.fits(height)

    # ---------- Columns ----------
    def add_column(self, column: Column | Mapping[str, Any]) -> PdfTable:
        column = self.registry.add(column)
        logger.debug(f"Column [{column.id}] added, width {column.width}")
        return self.set_column_width(column.id, column.width)

    def set_columns_defaults(self, params: Mapping[str, Any] | None) -> PdfTable:
        self.registry.set_defaults(params)
        return self

    def add_columns(self, columns: Iterable[Column | Mapping[str, Any]]) -> PdfTable:
        return self.set_columns(columns, add=True)

    def set_columns(
        self, columns: Iterable[Column | Mapping[str, Any]], add: bool = False
    ) -> PdfTable:
        if not add:
            self.registry.clear()
        for column in columns:
            self.add_column(column)
        return self

    def remove_column(self, column_id) -> PdfTable:
        self.registry.remove(column_id)
        return self

    def get_columns(self, with_hidden: bool = False) -> list[Column]:
        return self.registry.get_columns(with_hidden)

    def get_column(self, column_id) -> Column | None:
        return self.registry.get(column_id)

    def get_column_width_between(self, column_a=None, column_b=None) -> float:
        return self.registry.width_between(column_a, column_b)

    def get_column_width_until(self, column_id) -> float:
        return self.registry.width_until(column_id)

    def get_column_width_from(self, column_id) -> float:
        return self.registry.width_from(column_id)

    def get_width(self) -> float:
        return self.registry.total_width()

    def get_column_width(self, column_id) -> float | None:
        return self.get_column_param(column_id, "width")

    def set_column_width(self, column_id, width: float, silent: bool = False) -> PdfTable:
        return self.set_column_param(column_id, "width", width, silent)

    def get_column_param(self, column_id, param: str) -> Any:
        return self.registry.get_param(column_id, param)

    def set_column_param(
        self, column_id, key: str, value: Any, silent: bool = False
    ) -> PdfTable:
        column = self.registry.set_param(column_id, key, value)
        if column is not None and not silent and key == "width":
            self.emit(TableEvent.COLUMN_WIDTH_CHANGED, column)
        return self

    # ---------- Content ----------
    def add_body(self, data) -> PdfTable:
        """Measure then draw every row of data, with the header first if enabled.

        Args:
            data: Iterable of row mappings or a pandas DataFrame
        """
        rows = to_rows(data)
        self.context.sync(self.surface)
        logger.debug(f"Adding {len(rows)} rows at y={self.context.y:.1f}")
        self.emit(TableEvent.BODY_ADD, rows)

        if self.show_headers:
            self.add_header()

        # heights first, so each row is drawn knowing its exact height
        self.emit(TableEvent.ROW_HEIGHT_CALCULATE, rows)
        measurements = self.measurer.measure_rows(rows)
        self.emit(TableEvent.ROW_HEIGHT_CALCULATED, rows, measurements)

        for row, measurement in zip(rows, measurements):
            self.emit(TableEvent.ROW_ADD, row, measurement)
            self.renderer.add_row(row, measurement)
            self.emit(TableEvent.ROW_ADDED, row, measurement)

        self.emit(TableEvent.BODY_ADDED, rows)
        logger.debug(
            f"Body added, cursor at y={self.context.y:.1f} on page {self.context.page_index}"
        )
        return self

    def add_header(self) -> PdfTable:
        """Draw the header row built from each visible column's header label"""
        self.context.sync(self.surface)
        header_row = {column.id: column.header for column in self.get_columns()}
        self.emit(TableEvent.HEADER_ADD, header_row)

        self.emit(TableEvent.HEADER_HEIGHT_CALCULATE, header_row)
        measurement = self.measurer.measure_header(header_row)
        self.last_header_height = measurement.height
        self.emit(TableEvent.HEADER_HEIGHT_CALCULATED, header_row, measurement)

        self.renderer.add_row(header_row, measurement, is_header=True)
        self.emit(TableEvent.HEADER_ADDED, header_row, measurement)
        return self
