"""Drawable protocol shared by sprites and backgrounds."""

from typing import Optional, Protocol, Tuple

from pixel_scene.point import Point, PointCache
from pixel_scene.regions import Region
from pixel_scene.types import Color


class Drawable(Protocol):
    """Capability interface consumed by :class:`pixel_scene.layer.Layer`.

    ``stale`` means the drawable has moved since one of its pixels was last
    resolved. ``mark_resolved`` is called by the layer when this drawable wins
    a pixel lookup.
    """

    @property
    def stale(self) -> bool: ...

    @property
    def bounding_box(self) -> Region: ...

    def changed_pixels(
        self, cache: Optional[PointCache] = None
    ) -> Tuple[Point, ...]: ...

    def get_pixel(self, x: int, y: int) -> Optional[Color]: ...

    def mark_resolved(self) -> None: ...
