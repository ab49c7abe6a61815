"""Constant-color background drawable."""

from typing import Optional, Tuple

from pixel_scene.point import Point, PointCache
from pixel_scene.regions import EmptyRegion
from pixel_scene.types import Color, ColorLike, to_color


class Background:
    """Fills every coordinate with one color.

    A background never moves, so it is never stale and never reports changed
    pixels. It still answers every ``get_pixel`` query, which makes it the
    catch-all bottom entry of a layer.
    """

    def __init__(self, color: ColorLike):
        self.color: Color = to_color(color)

    @property
    def stale(self) -> bool:
        return False

    @property
    def bounding_box(self) -> EmptyRegion:
        return EmptyRegion()

    def changed_pixels(self, cache: Optional[PointCache] = None) -> Tuple[Point, ...]:
        return ()

    def get_pixel(self, x: int, y: int) -> Optional[Color]:
        return self.color

    def mark_resolved(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"Background(color={self.color!r})"
