import pytest

from pixel_scene.types import BlendMode, to_color


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#FF0000", (255, 0, 0, 255)),
        ("#000", (0, 0, 0, 255)),
        ("lime", (0, 255, 0, 255)),
        ((1, 2, 3), (1, 2, 3, 255)),
        ((1, 2, 3, 4), (1, 2, 3, 4)),
    ],
)
def test_to_color(value, expected) -> None:
    assert to_color(value) == expected


@pytest.mark.parametrize("value", ["not-a-color", (1, 2), (0, 0, 256), (-1, 0, 0, 0)])
def test_to_color_rejects_invalid(value) -> None:
    with pytest.raises(ValueError):
        to_color(value)


def test_blend_mode_values_match_canvas_names() -> None:
    assert BlendMode("source-over") is BlendMode.NORMAL
    assert BlendMode("lighter") is BlendMode.LIGHTER
