"""Cell padding resolution.

Padding lists follow the CSS shorthand order (top, right, bottom, left)
and hold one to four numbers:

- 1 value: same padding on every side
- 2 values: top/bottom, left/right
- 3 values: top, left/right, bottom
- 4 values: top, right, bottom, left
"""

from collections.abc import Sequence

from pdftable.enums import PaddingDirection


def get_padding_value(
    direction: PaddingDirection | str, padding: Sequence[float] | None
) -> float:
    """Resolve padding values into the inset for one direction.

    "horizontal" and "vertical" return the sum of both sides on that axis.
    Anything that cannot be resolved returns 0.

    Examples:
        >>> get_padding_value("left", [2, 4])
        4
        >>> get_padding_value("vertical", [1, 2, 3])
        4
    """
    try:
        direction = PaddingDirection(direction)
    except ValueError:
        return 0
    size = len(padding) if padding else 0

    if direction in (PaddingDirection.HORIZONTAL, PaddingDirection.VERTICAL):
        vertical = direction is PaddingDirection.VERTICAL
        if size == 1:
            return padding[0] * 2
        if size == 2:
            return padding[0] * 2 if vertical else padding[1] * 2
        if size == 3:
            return padding[0] + padding[2] if vertical else padding[1] * 2
        if size == 4:
            return padding[0] + padding[2] if vertical else padding[1] + padding[3]
        return 0

    if size == 1:
        return padding[0]
    if size == 2:
        if direction in (PaddingDirection.TOP, PaddingDirection.BOTTOM):
            return padding[0]
        return padding[1]
    if size == 3:
        if direction is PaddingDirection.TOP:
            return padding[0]
        if direction is PaddingDirection.BOTTOM:
            return padding[2]
        return padding[1]
    if size == 4:
        return {
            PaddingDirection.TOP: padding[0],
            PaddingDirection.RIGHT: padding[1],
            PaddingDirection.BOTTOM: padding[2],
            PaddingDirection.LEFT: padding[3],
        }[direction]
    return 0
