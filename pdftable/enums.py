# -*- coding: utf-8 -*-
from enum import Enum


class TableEvent(str, Enum):
    BODY_ADD = "body-add"
    BODY_ADDED = "body-added"
    ROW_ADD = "row-add"
    ROW_ADDED = "row-added"
    HEADER_ADD = "header-add"
    HEADER_ADDED = "header-added"
    ROW_HEIGHT_CALCULATE = "row-height-calculate"
    ROW_HEIGHT_CALCULATED = "row-height-calculated"
    HEADER_HEIGHT_CALCULATE = "header-height-calculate"
    HEADER_HEIGHT_CALCULATED = "header-height-calculated"
    PAGE_ADD = "page-add"
    PAGE_ADDED = "page-added"
    COLUMN_WIDTH_CHANGED = "column-width-changed"


class PaddingDirection(str, Enum):
    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"
    RIGHT = "right"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class BorderSide(str, Enum):
    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class HorizontalAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"
