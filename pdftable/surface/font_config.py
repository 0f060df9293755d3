"""Centralized font configuration for PDF tables."""

from enum import IntEnum


class FontSize(IntEnum):
    """Font sizes in points"""

    TABLE_HEADER = 9
    TABLE_DATA = 9
    TABLE_TITLE = 12
