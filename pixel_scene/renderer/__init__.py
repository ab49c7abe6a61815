"""Rendering subpackage.

Holds the drawing surfaces a :class:`pixel_scene.canvas.Canvas` paints onto.
The core only needs the two-method :class:`Surface` protocol; the bundled
implementations are:

* :class:`ImageSurface`: NumPy RGBA buffer with source-over and additive
  blending, exported as a Pillow image.
* :class:`RecordingSurface`: keeps the call log, used by tests and for
  determinism checks.
"""

from .surface import ImageSurface, RecordingSurface, Surface, SurfaceEvent

__all__ = ["ImageSurface", "RecordingSurface", "Surface", "SurfaceEvent"]
