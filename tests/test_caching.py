import pytest

from straightskel.caching import Cache, IdentityLookup
from straightskel.geometry import Point3D


class _DistanceCache(Cache):
    """Caches each point's distance from the origin."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def create(self, key):
        self.calls.append(key)
        return Point3D(0, 0, 0).distance(key)


def test_cache_creates_once():
    cache = _DistanceCache()
    key = Point3D(3, 4, 0)
    first = cache.get(key)
    second = cache.get(Point3D(3, 4, 0))
    assert first == 5.0
    assert second == 5.0
    assert cache.calls == [key]


def test_cache_put_overrides_creation():
    cache = _DistanceCache()
    key = Point3D(1, 1, 1)
    cache.put(key, "stored")
    assert cache.get(Point3D(1, 1, 1)) == "stored"
    assert cache.calls == []


def test_cache_keeps_insertion_order():
    cache = _DistanceCache()
    keys = [Point3D(9, 0, 0), Point3D(1, 0, 0), Point3D(5, 0, 0)]
    for key in keys:
        cache.get(key)
    assert list(cache.cache) == keys
    assert list(cache.cache.values()) == [9.0, 1.0, 5.0]


def test_cache_is_abstract():
    with pytest.raises(TypeError):
        Cache()


def test_identity_lookup_returns_first_instance():
    lookup = IdentityLookup()
    first = Point3D(1, 2, 3)
    second = Point3D(1, 2, 3)
    assert lookup.get(first) is first
    assert lookup.get(second) is first


def test_identity_lookup_put_replaces():
    lookup = IdentityLookup()
    first = Point3D(4, 5, 6)
    second = Point3D(4, 5, 6)
    lookup.get(first)
    lookup.put(second)
    assert lookup.get(Point3D(4, 5, 6)) is second


def test_identity_lookup_distinct_values():
    lookup = IdentityLookup()
    a = Point3D(0, 0, 0)
    b = Point3D(1, 0, 0)
    assert lookup.get(a) is a
    assert lookup.get(b) is b
    assert len(lookup.map) == 2