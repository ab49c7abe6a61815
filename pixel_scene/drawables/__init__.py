"""pixel_scene.drawables
=======================

Everything a :class:`pixel_scene.layer.Layer` can hold. Drawables share the
:class:`Drawable` protocol (``stale``, ``bounding_box``, ``changed_pixels``,
``get_pixel``, ``mark_resolved``); the two built-in variants are the movable
:class:`Sprite` and the constant-color :class:`Background`.

Convenience factories for common bitmaps live in :mod:`.shapes`::

    from pixel_scene.drawables import create_circle
"""

from .base import Drawable
from .background import Background
from .sprite import Sprite, make_bitmap, make_palette
from .shapes import CIRCLE_BITMAP, circle_bitmap, create_circle

__all__ = [
    "Drawable",
    "Background",
    "Sprite",
    "make_bitmap",
    "make_palette",
    "CIRCLE_BITMAP",
    "circle_bitmap",
    "create_circle",
]
