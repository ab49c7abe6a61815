"""Common type aliases and enumerations.

``Color`` is the canonical RGBA tuple every drawable resolves to; ``None``
(exported as ``TRANSPARENT``) means "no color here". ``BlendMode`` values
mirror the HTML canvas composite operation names so surfaces backed by other
toolkits can map them directly.
"""

from enum import StrEnum
from typing import Optional, Tuple, Union

from PIL import ImageColor
from pyrsistent.typing import PMap

Color = Tuple[int, int, int, int]
ColorLike = Union[str, Tuple[int, int, int], Tuple[int, int, int, int]]
PaletteIndex = int

Bitmap = Tuple[Tuple[PaletteIndex, ...], ...]
Palette = PMap[PaletteIndex, Color]

TRANSPARENT: Optional[Color] = None


class BlendMode(StrEnum):
    """How a layer's color combines with what is already on the surface."""

    NORMAL = "source-over"
    LIGHTER = "lighter"


def to_color(value: ColorLike) -> Color:
    """Normalize a color name, hex string or RGB(A) tuple to an RGBA tuple.

    Raises:
        ValueError: If ``value`` is not a recognizable color.
    """
    if isinstance(value, str):
        r, g, b, a = ImageColor.getcolor(value, "RGBA")  # type: ignore[misc]
        return (r, g, b, a)
    if len(value) == 3:
        r, g, b = value  # type: ignore[misc]
        a = 255
    elif len(value) == 4:
        r, g, b, a = value  # type: ignore[misc]
    else:
        raise ValueError(f"Color tuple must have 3 or 4 channels: {value!r}")
    channels = (int(r), int(g), int(b), int(a))
    if any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"Color channels must be within 0..255: {value!r}")
    return channels
