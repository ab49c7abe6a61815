"""Point value object & coordinate interning.

``Point`` is a frozen dataclass, so equal coordinates compare and hash equal
whether or not they were interned. ``PointCache`` additionally hands out one
canonical instance per ``(x, y)`` so repeated lookups are identity-equal.

The cache is an explicit object rather than hidden class state: a
:class:`pixel_scene.canvas.Canvas` owns one and may clear it every frame to
bound memory. ``DEFAULT_POINT_CACHE`` backs the module-level :func:`intern`
and :func:`add` helpers for callers that do not inject their own.

Coordinates are plain Python integers and never wrap or saturate.

Examples
--------
>>> from pixel_scene.point import PointCache
>>> cache = PointCache()
>>> cache.intern(1, 1) is cache.intern(1, 1)
True
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Point:
    """Integer pixel coordinate.

    Attributes:
        x: Column (0 at left).
        y: Row (0 at top).
    """

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class PointCache:
    """Canonical ``Point`` instances keyed by coordinate pair."""

    def __init__(self) -> None:
        self._points: Dict[Tuple[int, int], Point] = {}

    def intern(self, x: int, y: int) -> Point:
        """Return the shared ``Point`` for ``(x, y)``, creating it on first use."""
        key = (x, y)
        point = self._points.get(key)
        if point is None:
            point = Point(x, y)
            self._points[key] = point
        return point

    def add(self, a: Point, b: Point) -> Point:
        """Componentwise sum of ``a`` and ``b``, interned in this cache."""
        return self.intern(a.x + b.x, a.y + b.y)

    def clear(self) -> None:
        self._points.clear()

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Point):
            return self._points.get((key.x, key.y)) is key
        return key in self._points


DEFAULT_POINT_CACHE = PointCache()


def intern(x: int, y: int) -> Point:
    """Intern ``(x, y)`` in the process-wide default cache."""
    return DEFAULT_POINT_CACHE.intern(x, y)


def add(a: Point, b: Point) -> Point:
    """Componentwise sum interned in the process-wide default cache."""
    return DEFAULT_POINT_CACHE.add(a, b)
