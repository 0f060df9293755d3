"""Header/body styling for tables drawn on an FPDFSurface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pdftable.surface.style_manager import StyleManager

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from pdftable.table import PdfTable


class HeaderStylePlugin:
    """Applies the header style before the header row and the data style after it"""

    id = "headerstyle"

    def __init__(self, font_family: str | None = None):
        self.font_family = font_family
        self.style_manager: StyleManager | None = None

    def configure(self, table: PdfTable) -> None:
        self.style_manager = StyleManager(table.surface.pdf, self.font_family)
        self.style_manager.apply_table_data_style()
        table.on_header_add(self.on_header_add).on_header_added(self.on_header_added)

    def on_header_add(self, table: PdfTable, header_row) -> None:
        self.style_manager.apply_table_header_style()

    def on_header_added(self, table: PdfTable, header_row, measurement) -> None:
        self.style_manager.apply_table_data_style()
