"""Convenience factories for common sprite bitmaps.

Each helper returns a ready-to-place :class:`Sprite` or a raw bitmap. Index
``0`` is left out of generated palettes so the area around a shape stays
transparent.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from pixel_scene.drawables.sprite import Sprite, make_bitmap
from pixel_scene.point import Point, PointCache
from pixel_scene.types import Bitmap, ColorLike


CIRCLE_BITMAP: Bitmap = make_bitmap(
    [
        [0, 0, 0, 0, 1, 1, 0, 0, 0, 0],
        [0, 0, 1, 1, 1, 1, 1, 1, 0, 0],
        [0, 1, 1, 1, 1, 1, 1, 1, 1, 0],
        [0, 1, 1, 1, 1, 1, 1, 1, 1, 0],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [0, 1, 1, 1, 1, 1, 1, 1, 1, 0],
        [0, 1, 1, 1, 1, 1, 1, 1, 1, 0],
        [0, 0, 1, 1, 1, 1, 1, 1, 0, 0],
        [0, 0, 0, 0, 1, 1, 0, 0, 0, 0],
    ]
)


def circle_bitmap(diameter: int) -> Bitmap:
    """Filled disc of index ``1`` on a ``diameter`` square of index ``0``.

    Cells whose centers fall inside the circle are set. ``diameter <= 0``
    gives an empty bitmap.
    """
    if diameter <= 0:
        return ()
    r = diameter / 2.0
    centers = np.arange(diameter, dtype=np.float64) + 0.5 - r
    xx, yy = np.meshgrid(centers, centers)
    inside = (xx * xx + yy * yy) <= r * r
    return make_bitmap(inside.astype(np.int64))


def create_circle(
    origin: Point,
    color: ColorLike,
    bitmap: Optional[Bitmap] = None,
    points: Optional[PointCache] = None,
) -> Sprite:
    """Circle sprite colored ``color`` (defaults to the 10x10 ``CIRCLE_BITMAP``)."""
    return Sprite(
        origin,
        bitmap if bitmap is not None else CIRCLE_BITMAP,
        {1: color},
        points=points,
    )
