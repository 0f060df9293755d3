"""Drawing surfaces for pdftable."""

from pdftable.surface.base import DrawingSurface
from pdftable.surface.fpdf_surface import FPDFSurface, create_document
from pdftable.surface.font_config import FontSize
from pdftable.surface.style_manager import StyleManager

__all__ = [
    "DrawingSurface",
    "FPDFSurface",
    "create_document",
    "FontSize",
    "StyleManager",
]
