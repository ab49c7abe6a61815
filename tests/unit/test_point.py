import pytest

from pixel_scene.point import DEFAULT_POINT_CACHE, Point, PointCache, add, intern


@pytest.mark.parametrize("x, y", [(0, 0), (5, -3), (-1000, 1000), (2**40, 7)])
def test_intern_returns_same_instance(x: int, y: int) -> None:
    cache = PointCache()
    assert cache.intern(x, y) is cache.intern(x, y)


def test_distinct_caches_do_not_share_instances() -> None:
    a = PointCache().intern(1, 2)
    b = PointCache().intern(1, 2)
    assert a is not b
    assert a == b
    assert hash(a) == hash(b)


def test_add_is_componentwise_and_interned() -> None:
    cache = PointCache()
    total = cache.add(cache.intern(1, 2), Point(10, 20))
    assert total == Point(11, 22)
    assert total is cache.intern(11, 22)


def test_contains_checks_identity_for_points() -> None:
    cache = PointCache()
    p = cache.intern(3, 4)
    assert p in cache
    assert (3, 4) in cache
    assert Point(3, 4) not in cache
    assert len(cache) == 1


def test_clear_drops_canonical_instances() -> None:
    cache = PointCache()
    before = cache.intern(0, 0)
    cache.clear()
    assert len(cache) == 0
    assert cache.intern(0, 0) is not before


def test_module_helpers_use_default_cache() -> None:
    p = intern(123, 456)
    assert p is DEFAULT_POINT_CACHE.intern(123, 456)
    assert add(p, Point(1, 1)) is intern(124, 457)


def test_point_str() -> None:
    assert str(Point(1, -2)) == "(1, -2)"
