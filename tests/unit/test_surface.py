import pytest

from pixel_scene.renderer.surface import ImageSurface, RecordingSurface
from pixel_scene.types import BlendMode

from tests.test_utils import BLACK, GREEN, RED


def test_normal_fill_replaces_opaque_pixel() -> None:
    surface = ImageSurface(4, 4, BLACK)
    surface.fill_pixel(1, 2, RED)
    assert surface.get_pixel(1, 2) == RED
    assert surface.get_pixel(2, 1) == BLACK


def test_normal_fill_alpha_composites() -> None:
    surface = ImageSurface(1, 1, BLACK)
    surface.fill_pixel(0, 0, (255, 0, 0, 128))
    assert surface.get_pixel(0, 0) == (128, 0, 0, 255)


def test_lighter_adds_and_clamps() -> None:
    surface = ImageSurface(2, 1, BLACK)
    surface.set_blend_mode(BlendMode.LIGHTER)
    surface.fill_pixel(0, 0, RED)
    surface.fill_pixel(0, 0, GREEN)
    surface.fill_pixel(1, 0, (200, 0, 0, 255))
    surface.fill_pixel(1, 0, (200, 0, 0, 255))
    assert surface.get_pixel(0, 0) == (255, 255, 0, 255)
    assert surface.get_pixel(1, 0) == (255, 0, 0, 255)


@pytest.mark.parametrize("mode", [BlendMode.NORMAL, BlendMode.LIGHTER])
def test_transparent_and_out_of_bounds_fills_are_ignored(mode: BlendMode) -> None:
    surface = ImageSurface(2, 2, BLACK)
    surface.set_blend_mode(mode)
    surface.fill_pixel(0, 0, None)
    surface.fill_pixel(-1, 0, RED)
    surface.fill_pixel(0, 2, RED)
    assert (surface.pixels == 0).sum() == 2 * 2 * 3
    assert surface.get_pixel(0, 0) == BLACK


def test_to_image_exports_rgba() -> None:
    surface = ImageSurface(3, 2, "#000")
    surface.fill_pixel(2, 1, RED)
    image = surface.to_image()
    assert image.mode == "RGBA"
    assert image.size == (3, 2)
    assert image.getpixel((2, 1)) == RED
    assert image.getpixel((0, 0)) == BLACK


def test_invalid_surface_inputs() -> None:
    with pytest.raises(ValueError):
        ImageSurface(-1, 2)
    with pytest.raises(ValueError):
        ImageSurface(1, 1).set_blend_mode("multiply")  # type: ignore[arg-type]


def test_recording_surface_keeps_call_order() -> None:
    surface = RecordingSurface()
    surface.set_blend_mode(BlendMode.LIGHTER)
    surface.fill_pixel(1, 2, RED)
    assert surface.events == [("blend", BlendMode.LIGHTER), ("fill", 1, 2, RED)]
    assert surface.fills == [(1, 2, RED)]
    assert surface.blend_modes == [BlendMode.LIGHTER]
    surface.clear()
    assert surface.events == []
