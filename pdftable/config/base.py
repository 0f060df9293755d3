# -*- coding: utf-8 -*-
"""Default settings for pdftable, overridable through the environment."""

from . import getenv_bool, getenv_or_action

# Logging
LOG_LEVEL = getenv_or_action("PDFTABLE_LOG_LEVEL", action="ignore", default="INFO")

# Pagination
MIN_ROW_HEIGHT = float(
    getenv_or_action("PDFTABLE_MIN_ROW_HEIGHT", action="ignore", default="1")
)
BOTTOM_MARGIN = float(
    getenv_or_action("PDFTABLE_BOTTOM_MARGIN", action="ignore", default="5")
)
SHOW_HEADERS = getenv_bool("PDFTABLE_SHOW_HEADERS", True)
REPEAT_HEADER = getenv_bool("PDFTABLE_REPEAT_HEADER", True)

# Surface
PAGE_FORMAT = getenv_or_action("PDFTABLE_PAGE_FORMAT", action="ignore", default="A4")
PAGE_UNIT = "pt"
PAGE_MARGIN = 36.0
FONT_FAMILY = getenv_or_action(
    "PDFTABLE_FONT_FAMILY", action="ignore", default="Helvetica"
)
LINE_HEIGHT_FACTOR = 1.15

# Table styles, hex colours
HEADER_FILL_COLOR = getenv_or_action(
    "PDFTABLE_HEADER_FILL_COLOR", action="ignore", default="#00529B"
)
HEADER_TEXT_COLOR = "#FFFFFF"
HEADER_BORDER_COLOR = "#C8C8C8"
DATA_FILL_COLOR = "#FFFFFF"
DATA_TEXT_COLOR = "#000000"
DATA_BORDER_COLOR = "#D2D2D2"
