"""fpdf2 styles for the header, data and title rows of a table."""

from fpdf import FPDF

from pdftable import config
from pdftable.surface.font_config import FontSize
from pdftable.utils.colors import hex_to_rgb


class StyleManager:
    """Switches the document between table styles.

    Colours come from ``pdftable.config`` and are read when a style is applied.
    """

    def __init__(self, pdf_instance: FPDF, font_family: str | None = None):
        self.pdf = pdf_instance
        self.font_family = font_family or config.FONT_FAMILY

    def _apply(
        self,
        font_style: str,
        font_size: int,
        text_color: str,
        fill_color: str | None = None,
        draw_color: str | None = None,
    ):
        self.pdf.set_font(self.font_family, font_style, font_size)
        self.pdf.set_text_color(*hex_to_rgb(text_color))
        if fill_color is not None:
            self.pdf.set_fill_color(*hex_to_rgb(fill_color))
        if draw_color is not None:
            self.pdf.set_draw_color(*hex_to_rgb(draw_color))

    def apply_table_header_style(self):
        """Bold header text on the header fill colour"""
        self._apply(
            "B",
            FontSize.TABLE_HEADER,
            config.HEADER_TEXT_COLOR,
            config.HEADER_FILL_COLOR,
            config.HEADER_BORDER_COLOR,
        )

    def apply_table_data_style(self):
        self._apply(
            "",
            FontSize.TABLE_DATA,
            config.DATA_TEXT_COLOR,
            config.DATA_FILL_COLOR,
            config.DATA_BORDER_COLOR,
        )

    def apply_table_title_style(self):
        self._apply("B", FontSize.TABLE_TITLE, config.DATA_TEXT_COLOR)
