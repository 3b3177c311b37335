"""Geometry, ordered containers, caches, height events and output faces for straight skeletons."""

__version__ = "0.1.0"

__all__ = [
    "caching",
    "containers",
    "events",
    "geometry",
    "iteration",
    "output",
    "polygons",
]