import logging

import pytest

from pixel_scene.canvas import Canvas
from pixel_scene.config import PointCacheScope, SceneConfig
from pixel_scene.drawables import Background
from pixel_scene.layer import Layer
from pixel_scene.point import DEFAULT_POINT_CACHE, Point, PointCache
from pixel_scene.renderer.surface import RecordingSurface
from pixel_scene.types import BlendMode

from tests.test_utils import BLACK, GREEN, RED, make_solid_sprite, rect_points


def test_canvas_unions_layers_without_duplicates() -> None:
    a = make_solid_sprite(origin=(0, 0), size=(2, 2))
    b = make_solid_sprite(origin=(1, 0), size=(2, 2))
    canvas = Canvas([Layer([a]), Layer([b])])
    pixels = canvas.changed_pixels()
    assert len(pixels) == len(set(pixels)) == 6
    assert set(pixels) == rect_points(0, 0, 3, 2)


def test_changed_pixels_interned_in_canvas_cache() -> None:
    cache = PointCache()
    canvas = Canvas([Layer([make_solid_sprite(size=(2, 1))])], points=cache)
    for p in canvas.changed_pixels():
        assert p is cache.intern(p.x, p.y)


def test_draw_composites_every_layer_bottom_to_top() -> None:
    sprite = make_solid_sprite(origin=(0, 0), size=(1, 2), color=RED)
    canvas = Canvas([Layer([Background(BLACK)]), Layer([sprite], BlendMode.LIGHTER)])
    surface = RecordingSurface()

    assert canvas.draw(surface) == 2
    assert surface.events == [
        ("blend", BlendMode.NORMAL),
        ("fill", 0, 0, BLACK),
        ("fill", 0, 1, BLACK),
        ("blend", BlendMode.LIGHTER),
        ("fill", 0, 0, RED),
        ("fill", 0, 1, RED),
    ]
    assert canvas.frame == 1


def test_draw_resolves_staleness_and_next_frame_is_empty() -> None:
    sprite = make_solid_sprite(origin=(3, 3), size=(2, 2))
    canvas = Canvas([Layer([Background(BLACK)]), Layer([sprite])])
    canvas.draw(RecordingSurface())
    assert not sprite.stale

    surface = RecordingSurface()
    assert canvas.draw(surface) == 0
    assert surface.events == []


def test_draw_after_move_only_touches_old_and_new_boxes() -> None:
    sprite = make_solid_sprite(origin=(0, 0), size=(2, 2), color=GREEN)
    canvas = Canvas([Layer([Background(BLACK)]), Layer([sprite])])
    canvas.draw(RecordingSurface())

    sprite.move(Point(5, 5))
    surface = RecordingSurface()
    canvas.draw(surface)

    touched = {Point(x, y) for x, y, _ in surface.fills}
    assert touched == rect_points(0, 0, 2, 2) | rect_points(5, 5, 7, 7)
    top_fills = surface.fills[8:]
    assert {(x, y) for x, y, c in top_fills if c is None} == {
        (x, y) for x in range(2) for y in range(2)
    }
    assert {(x, y) for x, y, c in top_fills if c == GREEN} == {
        (x, y) for x in range(5, 7) for y in range(5, 7)
    }


def test_draw_pixel_composites_single_pixel() -> None:
    canvas = Canvas(
        [Layer([Background(BLACK)]), Layer([make_solid_sprite(color=RED)], "lighter")]
    )
    surface = RecordingSurface()
    canvas.draw_pixel(surface, Point(1, 1))
    assert surface.events == [
        ("blend", BlendMode.NORMAL),
        ("fill", 1, 1, BLACK),
        ("blend", BlendMode.LIGHTER),
        ("fill", 1, 1, RED),
    ]


@pytest.mark.parametrize(
    "scope, expected_empty", [(PointCacheScope.FRAME, True), (PointCacheScope.SESSION, False)]
)
def test_point_cache_scope(scope: PointCacheScope, expected_empty: bool) -> None:
    cache = PointCache()
    cache.intern(999, 999)
    canvas = Canvas([Layer([])], points=cache, config=SceneConfig(point_cache_scope=scope))
    canvas.draw(RecordingSurface())
    assert ((999, 999) not in cache) is expected_empty


def test_draw_logs_frame_stats(caplog: pytest.LogCaptureFixture) -> None:
    canvas = Canvas([Layer([make_solid_sprite(size=(1, 1))])])
    with caplog.at_level(logging.DEBUG, logger="pixel_scene.canvas"):
        canvas.draw(RecordingSurface())
    assert "frame 1: redrew 1 pixels" in caplog.text


def test_canvas_bounding_box() -> None:
    canvas = Canvas(
        [Layer([make_solid_sprite(origin=(0, 0), size=(1, 1))]),
         Layer([make_solid_sprite(origin=(2, 0), size=(1, 1))])]
    )
    assert set(canvas.bounding_box.pixels()) == {Point(0, 0), Point(2, 0)}


def test_frame_scope_bounds_interned_points_for_default_sprites() -> None:
    default_before = len(DEFAULT_POINT_CACHE)
    sprite = make_solid_sprite(origin=(0, 0), size=(2, 2))
    canvas = Canvas(
        [Layer([sprite])], config=SceneConfig(point_cache_scope=PointCacheScope.FRAME)
    )
    surface = RecordingSurface()
    for i in range(1, 2001):
        sprite.move(Point(i, i))
        canvas.draw(surface)
        surface.clear()

    assert len(DEFAULT_POINT_CACHE) == default_before
    assert len(canvas.points) <= 8
