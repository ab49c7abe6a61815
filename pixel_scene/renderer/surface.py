"""Drawing surfaces.

A :class:`Surface` receives one ``set_blend_mode`` call per layer and one
``fill_pixel`` call per changed pixel per layer. ``fill_pixel`` gets ``None``
when the layer has no color there.

* :class:`ImageSurface`: RGBA NumPy buffer. ``NORMAL`` is source-over alpha
  compositing and ``LIGHTER`` adds premultiplied channels, clamped to 255.
* :class:`RecordingSurface`: call log for tests and determinism checks.
"""

from typing import List, Optional, Protocol, Tuple, Union

import numpy as np
import numpy.typing as npt
from PIL import Image

from pixel_scene.types import BlendMode, Color, ColorLike, to_color

UInt8Array = npt.NDArray[np.uint8]
FloatArray = npt.NDArray[np.float32]

SurfaceEvent = Union[
    Tuple[str, BlendMode],
    Tuple[str, int, int, Optional[Color]],
]


class Surface(Protocol):
    """Pixel sink driven by :class:`pixel_scene.layer.Layer`."""

    def set_blend_mode(self, mode: BlendMode) -> None: ...

    def fill_pixel(self, x: int, y: int, color: Optional[Color]) -> None: ...


def _source_over(dst: UInt8Array, src: Color) -> UInt8Array:
    """Composite ``src`` over ``dst`` (straight alpha, both RGBA uint8)."""
    s: FloatArray = np.asarray(src, dtype=np.float32) / 255.0
    d: FloatArray = dst.astype(np.float32) / 255.0
    sa, da = s[3], d[3]
    out_a = sa + da * (1.0 - sa)
    if out_a <= 0.0:
        return np.zeros(4, dtype=np.uint8)
    out_rgb = (s[:3] * sa + d[:3] * da * (1.0 - sa)) / out_a
    out = np.empty(4, dtype=np.float32)
    out[:3] = out_rgb
    out[3] = out_a
    return np.clip(np.rint(out * 255.0), 0, 255).astype(np.uint8)


def _lighter(dst: UInt8Array, src: Color) -> UInt8Array:
    """Additive blend: premultiplied channel sums clamped to 255."""
    s = np.asarray(src, dtype=np.float32)
    d = dst.astype(np.float32)
    sa, da = s[3] / 255.0, d[3] / 255.0
    out = np.empty(4, dtype=np.float32)
    out[:3] = s[:3] * sa + d[:3] * da
    out[3] = min(255.0, s[3] + d[3])
    if out[3] > 0:
        # back to straight alpha
        out[:3] = out[:3] * 255.0 / out[3]
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


class ImageSurface:
    """In-memory RGBA raster.

    Transparent fills and coordinates outside the raster are ignored.

    Attributes:
        width: Raster width in pixels.
        height: Raster height in pixels.
        blend_mode: Mode applied by the next fills.
        pixels: ``(height, width, 4)`` uint8 RGBA buffer.
    """

    width: int
    height: int
    blend_mode: BlendMode

    def __init__(
        self, width: int, height: int, background: ColorLike = (0, 0, 0, 0)
    ):
        if width < 0 or height < 0:
            raise ValueError(f"Surface size must be non-negative: {width}x{height}")
        self.width = width
        self.height = height
        self.blend_mode = BlendMode.NORMAL
        self.pixels: UInt8Array = np.zeros((height, width, 4), dtype=np.uint8)
        self.pixels[...] = to_color(background)

    def set_blend_mode(self, mode: BlendMode) -> None:
        self.blend_mode = BlendMode(mode)

    def fill_pixel(self, x: int, y: int, color: Optional[Color]) -> None:
        if color is None:
            return
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        if self.blend_mode == BlendMode.LIGHTER:
            self.pixels[y, x] = _lighter(self.pixels[y, x], color)
        else:
            self.pixels[y, x] = _source_over(self.pixels[y, x], color)

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b, a = (int(c) for c in self.pixels[y, x])
        return (r, g, b, a)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels.copy(), mode="RGBA")


class RecordingSurface:
    """Surface that only records the calls it receives.

    Events are ``("blend", mode)`` and ``("fill", x, y, color)`` tuples in
    call order.
    """

    def __init__(self) -> None:
        self.events: List[SurfaceEvent] = []

    def set_blend_mode(self, mode: BlendMode) -> None:
        self.events.append(("blend", BlendMode(mode)))

    def fill_pixel(self, x: int, y: int, color: Optional[Color]) -> None:
        self.events.append(("fill", x, y, color))

    @property
    def fills(self) -> List[Tuple[int, int, Optional[Color]]]:
        return [(e[1], e[2], e[3]) for e in self.events if e[0] == "fill"]  # type: ignore[misc]

    @property
    def blend_modes(self) -> List[BlendMode]:
        return [e[1] for e in self.events if e[0] == "blend"]  # type: ignore[misc]

    def clear(self) -> None:
        self.events.clear()
