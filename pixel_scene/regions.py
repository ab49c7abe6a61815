"""Region algebra.

A region describes a set of pixel coordinates without rasterizing it. Three
variants exist:

* :class:`BoundingRect`: half-open rectangle ``[origin, opposite)``.
* :class:`BoundingGroup`: ordered union of child regions.
* :class:`EmptyRegion`: no pixels at all.

Every variant exposes ``pixels(cache=None)`` returning an ordered tuple with
no duplicates. The call is pure; passing a :class:`PointCache` only changes
which (equal) ``Point`` instances come back.

Representing dirty areas this way keeps per-frame work proportional to the
pixels near moving sprites instead of the whole surface.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Union

from pixel_scene.point import Point, PointCache


def unique_pixels(groups: Iterable[Iterable[Point]]) -> Tuple[Point, ...]:
    """Order-preserving union of several pixel sequences.

    The first occurrence of each point wins its position in the output.
    """
    seen: Dict[Point, None] = {}
    for pixels in groups:
        for pixel in pixels:
            seen.setdefault(pixel, None)
    return tuple(seen)


@dataclass(frozen=True)
class EmptyRegion:
    """Region covering nothing."""

    def pixels(self, cache: Optional[PointCache] = None) -> Tuple[Point, ...]:
        return ()

    def __str__(self) -> str:
        return "∅"


@dataclass(frozen=True)
class BoundingRect:
    """Axis-aligned rectangle, origin inclusive and opposite exclusive.

    Attributes:
        origin: Top-left corner (inclusive).
        opposite: Bottom-right corner (exclusive).
    """

    origin: Point
    opposite: Point

    @property
    def width(self) -> int:
        return max(0, self.opposite.x - self.origin.x)

    @property
    def height(self) -> int:
        return max(0, self.opposite.y - self.origin.y)

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return (
            self.origin.x <= x < self.opposite.x
            and self.origin.y <= y < self.opposite.y
        )

    def pixels(self, cache: Optional[PointCache] = None) -> Tuple[Point, ...]:
        """All covered coordinates, column by column (x outer, y inner).

        A rectangle with no width or no height yields an empty tuple.
        """
        make = cache.intern if cache is not None else Point
        xs = range(self.origin.x, self.opposite.x)
        ys = range(self.origin.y, self.opposite.y)
        return tuple(make(x, y) for x in xs for y in ys)

    def __str__(self) -> str:
        return f"{self.origin}→{self.opposite}"


@dataclass(frozen=True)
class BoundingGroup:
    """Union of child regions, de-duplicated in child order.

    Attributes:
        children: Member regions; may themselves be groups.
    """

    children: Tuple["Region", ...] = ()

    def pixels(self, cache: Optional[PointCache] = None) -> Tuple[Point, ...]:
        return unique_pixels(child.pixels(cache) for child in self.children)

    def __str__(self) -> str:
        return "[" + ", ".join(str(child) for child in self.children) + "]"


Region = Union[BoundingRect, BoundingGroup, EmptyRegion]
