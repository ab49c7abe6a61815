"""Movable raster sprite.

A :class:`Sprite` pairs an immutable bitmap of palette indices with a
palette and a mutable origin. It remembers the bounding box it had before
its last :meth:`Sprite.move`, so the pixels it vacated and the pixels it now
covers can be re-resolved together.

Lifecycle:

* Construction: ``stale`` is True and there is no previous bounding box, so
  the first query reports the whole initial box (bootstrap draw).
* ``move``: snapshot the current box, mark stale, then replace the origin.
* A layer that resolves a pixel to this sprite calls ``mark_resolved``.
"""

from typing import Iterable, Mapping, Optional, Tuple

from pyrsistent import pmap

from pixel_scene.point import Point, PointCache
from pixel_scene.regions import BoundingGroup, BoundingRect
from pixel_scene.types import (
    TRANSPARENT,
    Bitmap,
    Color,
    ColorLike,
    Palette,
    PaletteIndex,
    to_color,
)


def make_bitmap(rows: Iterable[Iterable[PaletteIndex]]) -> Bitmap:
    """Freeze ``rows`` into a rectangular tuple-of-tuples bitmap.

    Accepts nested lists or a 2D ``numpy`` array of non-negative integers.

    Raises:
        ValueError: If rows differ in length or an index is negative.
    """
    bitmap: Bitmap = tuple(tuple(int(v) for v in row) for row in rows)
    if bitmap:
        width = len(bitmap[0])
        for y, row in enumerate(bitmap):
            if len(row) != width:
                raise ValueError(
                    f"Bitmap row {y} has {len(row)} columns, expected {width}"
                )
            if any(v < 0 for v in row):
                raise ValueError(f"Bitmap row {y} contains a negative palette index")
    return bitmap


def make_palette(colors: Mapping[PaletteIndex, Optional[ColorLike]]) -> Palette:
    """Normalize a palette mapping; ``None`` entries are dropped (transparent)."""
    return pmap(
        {
            int(index): to_color(color)
            for index, color in colors.items()
            if color is not None
        }
    )


class Sprite:
    """Bitmap drawable with an origin that changes only through :meth:`move`.

    Attributes:
        bitmap: Rows of palette indices (``bitmap[y][x]``).
        palette: Index to RGBA color; a missing index is transparent.
        stale: True while the sprite has unresolved movement.
        last_bounding_box: Box before the latest move, ``None`` until one happens.
        points: Optional cache interning the origin and box corners; without one
            the sprite holds plain value points and never grows a shared cache.
    """

    bitmap: Bitmap
    palette: Palette
    stale: bool
    last_bounding_box: Optional[BoundingRect]
    points: Optional[PointCache]

    def __init__(
        self,
        origin: Point,
        bitmap: Iterable[Iterable[PaletteIndex]],
        palette: Mapping[PaletteIndex, Optional[ColorLike]],
        points: Optional[PointCache] = None,
    ):
        self.points = points
        self._origin = self._point(origin.x, origin.y)
        self.bitmap = make_bitmap(bitmap)
        self.palette = make_palette(palette)
        self.stale = True
        self.last_bounding_box = None

    def _point(self, x: int, y: int) -> Point:
        if self.points is None:
            return Point(x, y)
        return self.points.intern(x, y)

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def width(self) -> int:
        return len(self.bitmap[0]) if self.bitmap else 0

    @property
    def height(self) -> int:
        return len(self.bitmap)

    @property
    def bounding_box(self) -> BoundingRect:
        """Rectangle covered by the bitmap at the current origin."""
        return BoundingRect(
            self._origin,
            self._point(self._origin.x + self.width, self._origin.y + self.height),
        )

    def move(self, origin: Point) -> None:
        """Relocate the sprite.

        The current bounding box is captured *before* the origin changes, so
        :meth:`changed_pixels` covers both the old and the new location.
        """
        self.last_bounding_box = self.bounding_box
        self.stale = True
        self._origin = self._point(origin.x, origin.y)

    def changed_pixels(self, cache: Optional[PointCache] = None) -> Tuple[Point, ...]:
        """Pixels to re-resolve: previous box (if any) plus current box."""
        if self.last_bounding_box is not None:
            group = BoundingGroup((self.last_bounding_box, self.bounding_box))
            return group.pixels(cache)
        return self.bounding_box.pixels(cache)

    def get_pixel(self, x: int, y: int) -> Optional[Color]:
        """Color at absolute ``(x, y)``, or ``TRANSPARENT`` outside the bitmap."""
        rx = x - self._origin.x
        ry = y - self._origin.y
        if rx < 0 or ry < 0 or rx >= self.width or ry >= self.height:
            return TRANSPARENT
        return self.palette.get(self.bitmap[ry][rx], TRANSPARENT)

    def mark_resolved(self) -> None:
        self.stale = False

    def __repr__(self) -> str:
        return (
            f"Sprite(origin={self._origin}, size={self.width}x{self.height}, "
            f"stale={self.stale})"
        )
