"""
colors.py - Colour parsing
--------------------------
Single responsibility: convert colour notations to RGB tuples
"""

RGB = tuple[int, int, int]


def hex_to_rgb(value: str | RGB) -> RGB:
    """Convert "#RGB" or "#RRGGBB" to an (r, g, b) tuple, tuples pass through"""
    if not isinstance(value, str):
        r, g, b = value
        return int(r), int(g), int(b)
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex colour: {value}")
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))
