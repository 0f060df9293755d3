"""Capabilities the layout engine needs from a drawing surface."""

from typing import Any, Protocol, runtime_checkable

RGB = tuple[int, int, int]


@runtime_checkable
class DrawingSurface(Protocol):
    """A paginated canvas with a vertical cursor, y growing downwards.

    Text options are the column's ``text_options()``: ``align`` plus the
    optional ``font_family``, ``font_style`` and ``font_size``.
    """

    @property
    def page_height(self) -> float: ...

    @property
    def left_margin(self) -> float: ...

    @property
    def top_margin(self) -> float: ...

    @property
    def bottom_margin(self) -> float: ...

    @property
    def line_height(self) -> float:
        """Height of one line of text in the current font"""
        ...

    def get_y(self) -> float: ...

    def set_y(self, y: float) -> None: ...

    def text_height(self, text: str, width: float, options: dict[str, Any]) -> float:
        """Height of text once wrapped to width"""
        ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        width: float,
        height: float,
        options: dict[str, Any],
    ) -> None: ...

    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: RGB | None = None
    ) -> None:
        """Fill a rectangle, with the current fill colour when color is None"""
        ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def add_page(self) -> None: ...
