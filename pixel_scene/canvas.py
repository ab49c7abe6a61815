"""Canvas: the layered scene and its per-frame redraw.

A frame is:

1. The driver moves sprites (:meth:`pixel_scene.drawables.Sprite.move`).
2. :meth:`Canvas.changed_pixels` unions the dirty pixels of every layer.
3. :meth:`Canvas.draw` re-resolves each of those pixels through every layer,
   bottom to top, so upper layers composite over lower ones per their blend
   mode.

All moves for a frame must happen before ``draw``; the canvas never
observes a half-updated scene because the whole loop is single-threaded.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from pixel_scene.config import DEFAULT_SCENE_CONFIG, PointCacheScope, SceneConfig
from pixel_scene.layer import Layer
from pixel_scene.point import Point, PointCache
from pixel_scene.regions import BoundingGroup, unique_pixels
from pixel_scene.renderer.surface import Surface

logger = logging.getLogger(__name__)


class Canvas:
    """Ordered layers (first = bottom) plus the scene's point cache.

    Attributes:
        layers: Paint order, bottom to top.
        points: Interning cache used for changed-pixel queries.
        config: Scene configuration; only ``point_cache_scope`` is read here.
        frame: Number of completed :meth:`draw` calls.
    """

    layers: List[Layer]
    points: PointCache
    config: SceneConfig
    frame: int

    def __init__(
        self,
        layers: Sequence[Layer],
        points: Optional[PointCache] = None,
        config: SceneConfig = DEFAULT_SCENE_CONFIG,
    ):
        self.layers = list(layers)
        self.points = points if points is not None else PointCache()
        self.config = config
        self.frame = 0

    @property
    def bounding_box(self) -> BoundingGroup:
        return BoundingGroup(tuple(layer.bounding_box for layer in self.layers))

    def changed_pixels(self) -> Tuple[Point, ...]:
        return unique_pixels(layer.changed_pixels(self.points) for layer in self.layers)

    def draw(self, surface: Surface) -> int:
        """Redraw every changed pixel through every layer.

        Layers are visited bottom to top and each one paints the full set of
        changed pixels after a single blend-mode switch. Pixels do not affect
        one another, so the result equals compositing pixel by pixel.

        Returns:
            int: Number of changed pixels redrawn (0 means no surface calls).
        """
        if self.config.point_cache_scope == PointCacheScope.FRAME:
            self.points.clear()
        pixels = self.changed_pixels()
        if pixels:
            for layer in self.layers:
                layer.draw_pixels(surface, pixels)
        self.frame += 1
        logger.debug(
            "frame %s: redrew %s pixels (%s interned points)",
            self.frame,
            len(pixels),
            len(self.points),
        )
        return len(pixels)

    def draw_pixel(self, surface: Surface, pixel: Point) -> None:
        """Composite a single pixel through all layers, bottom to top."""
        for layer in self.layers:
            layer.draw_pixel(surface, pixel)
