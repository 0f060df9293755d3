from unittest.mock import MagicMock

from pdftable import config
from pdftable.surface.font_config import FontSize
from pdftable.surface.style_manager import StyleManager


class TestStyleManager:
    """Tests for table styles applied to the document."""

    def test_header_style(self):
        pdf = MagicMock()
        StyleManager(pdf, "Courier").apply_table_header_style()

        pdf.set_font.assert_called_once_with("Courier", "B", FontSize.TABLE_HEADER)
        pdf.set_fill_color.assert_called_once_with(0, 82, 155)
        pdf.set_text_color.assert_called_once_with(255, 255, 255)
        pdf.set_draw_color.assert_called_once_with(200, 200, 200)

    def test_data_style(self):
        pdf = MagicMock()
        StyleManager(pdf).apply_table_data_style()

        pdf.set_font.assert_called_once_with(config.FONT_FAMILY, "", FontSize.TABLE_DATA)
        pdf.set_text_color.assert_called_once_with(0, 0, 0)
        pdf.set_draw_color.assert_called_once_with(210, 210, 210)

    def test_title_style_keeps_colours(self):
        pdf = MagicMock()
        StyleManager(pdf).apply_table_title_style()

        pdf.set_font.assert_called_once_with(config.FONT_FAMILY, "B", FontSize.TABLE_TITLE)
        pdf.set_fill_color.assert_not_called()

    def test_colours_follow_config(self, monkeypatch):
        monkeypatch.setattr(config, "HEADER_FILL_COLOR", "#102030")
        pdf = MagicMock()
        StyleManager(pdf).apply_table_header_style()

        pdf.set_fill_color.assert_called_once_with(16, 32, 48)
