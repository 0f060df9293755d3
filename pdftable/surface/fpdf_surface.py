"""Drawing surface backed by an fpdf2 document."""

from contextlib import contextmanager
from typing import Any

from fpdf import FPDF

from pdftable import config
from pdftable.exceptions import SurfaceError
from pdftable.surface.base import RGB
from pdftable.surface.font_config import FontSize

ALIGNMENTS = {"left": "L", "center": "C", "right": "R", "justify": "J"}


def create_document(
    page_format: str | None = None, margin: float | None = None
) -> FPDF:
    """New FPDF document in points with one page and the data font set"""
    margin = config.PAGE_MARGIN if margin is None else margin
    pdf = FPDF(unit=config.PAGE_UNIT, format=page_format or config.PAGE_FORMAT)
    pdf.set_margins(margin, margin, margin)
    pdf.set_auto_page_break(False, margin=margin)
    pdf.set_font(config.FONT_FAMILY, "", FontSize.TABLE_DATA)
    pdf.add_page()
    return pdf


class FPDFSurface:
    """Adapts an FPDF document to the DrawingSurface protocol.

    Coordinates are in the document unit, with the origin at the top-left
    corner of the page like fpdf2 itself.
    """

    def __init__(
        self,
        pdf: FPDF | None = None,
        line_height_factor: float = config.LINE_HEIGHT_FACTOR,
    ):
        if pdf is None:
            pdf = create_document()
        if pdf.page == 0:
            raise SurfaceError("FPDF document has no page, call add_page() first")
        self.pdf = pdf
        self.line_height_factor = line_height_factor

    @property
    def page_height(self) -> float:
        return self.pdf.h

    @property
    def left_margin(self) -> float:
        return self.pdf.l_margin

    @property
    def top_margin(self) -> float:
        return self.pdf.t_margin

    @property
    def bottom_margin(self) -> float:
        return self.pdf.b_margin

    @property
    def line_height(self) -> float:
        return self.pdf.font_size * self.line_height_factor

    def get_y(self) -> float:
        return self.pdf.get_y()

    def set_y(self, y: float) -> None:
        self.pdf.set_y(y)

    @contextmanager
    def _text_style(self, options: dict[str, Any]):
        font = {
            key: options[key]
            for key in ("font_family", "font_style", "font_size")
            if key in options
        }
        if not font:
            yield
            return
        with self.pdf.local_context(**font):
            yield

    def text_height(self, text: str, width: float, options: dict[str, Any]) -> float:
        with self._text_style(options):
            line_h = self.line_height
            lines = self.pdf.multi_cell(
                width,
                line_h,
                text,
                border=0,
                align=ALIGNMENTS.get(options.get("align"), "L"),
                dry_run=True,
                output="LINES",
            )
            count = len(lines) if isinstance(lines, (list, tuple)) else 1
            return max(1, count) * line_h

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        width: float,
        height: float,
        options: dict[str, Any],
    ) -> None:
        ap = getattr(self.pdf, "auto_page_break", True)
        self.pdf.set_auto_page_break(False)
        with self._text_style(options):
            self.pdf.set_xy(x, y)
            self.pdf.multi_cell(
                width,
                self.line_height,
                text,
                border=0,
                align=ALIGNMENTS.get(options.get("align"), "L"),
            )
        self.pdf.set_auto_page_break(ap, margin=self.pdf.b_margin)

    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: RGB | None = None
    ) -> None:
        if color is None:
            self.pdf.rect(x, y, w, h, style="F")
            return
        with self.pdf.local_context(fill_color=color, draw_color=color):
            self.pdf.rect(x, y, w, h, style="DF")

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.pdf.line(x1, y1, x2, y2)

    def add_page(self) -> None:
        self.pdf.add_page()
