"""Plugins shipped with pdftable."""

from pdftable.plugins.base import TablePlugin
from pdftable.plugins.header_style import HeaderStylePlugin
from pdftable.plugins.row_shader import RowShader

__all__ = ["TablePlugin", "HeaderStylePlugin", "RowShader"]
