"""Layer: ordered drawables sharing one blend mode.

Lookup policy: ``get_pixel`` walks drawables in list order and the first one
that returns a color wins. Only that drawable is marked resolved; stale
drawables it hides keep their flag and are asked again the next time one of
their pixels is dirty.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from pixel_scene.drawables.base import Drawable
from pixel_scene.point import Point, PointCache
from pixel_scene.regions import BoundingGroup, unique_pixels
from pixel_scene.renderer.surface import Surface
from pixel_scene.types import TRANSPARENT, BlendMode, Color


class Layer:
    """Drawables painted with one blend mode.

    Attributes:
        objects: Drawables in lookup order; the first one returning a color wins.
        blend_mode: How resolved colors combine with the surface. A falsy value
            (``None``, ``False``, ``""``) means ``BlendMode.NORMAL``.
    """

    objects: List[Drawable]
    blend_mode: BlendMode

    def __init__(
        self,
        objects: Sequence[Drawable],
        blend_mode: Optional[BlendMode] = BlendMode.NORMAL,
    ):
        self.objects = list(objects)
        self.blend_mode = BlendMode(blend_mode) if blend_mode else BlendMode.NORMAL

    @property
    def bounding_box(self) -> BoundingGroup:
        return BoundingGroup(tuple(obj.bounding_box for obj in self.objects))

    def changed_pixels(self, cache: Optional[PointCache] = None) -> Tuple[Point, ...]:
        """Union of the changed pixels of stale drawables only."""
        return unique_pixels(
            obj.changed_pixels(cache) for obj in self.objects if obj.stale
        )

    def get_pixel(self, x: int, y: int) -> Optional[Color]:
        for obj in self.objects:
            color = obj.get_pixel(x, y)
            if color is not None:
                obj.mark_resolved()
                return color
        return TRANSPARENT

    def draw_pixel(self, surface: Surface, pixel: Point) -> None:
        """Resolve ``pixel`` and paint it with this layer's blend mode."""
        surface.set_blend_mode(self.blend_mode)
        self._fill(surface, pixel)

    def draw_pixels(self, surface: Surface, pixels: Iterable[Point]) -> None:
        """Like :meth:`draw_pixel` for many pixels, switching blend mode once."""
        surface.set_blend_mode(self.blend_mode)
        for pixel in pixels:
            self._fill(surface, pixel)

    def _fill(self, surface: Surface, pixel: Point) -> None:
        surface.fill_pixel(pixel.x, pixel.y, self.get_pixel(pixel.x, pixel.y))

    def __repr__(self) -> str:
        return f"Layer(objects={self.objects!r}, blend_mode={self.blend_mode!s})"
