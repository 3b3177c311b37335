"""Clean-up of polygon loops produced by the skeleton."""

from __future__ import annotations

import math
from typing import List

from .geometry import Point3D, Vector3D
from .iteration import consecutive_triples

_STRAIGHT_TOLERANCE = 0.001


def _direction(start: Point3D, end: Point3D) -> Vector3D:
    return Vector3D(end.x - start.x, end.y - start.y, end.z - start.z)


def remove_straights(poly: List[Point3D]) -> None:
    """Drop, in place, the points of a closed loop where it runs straight on
    or turns straight back.

    Loops with fewer than three points are left alone. A point whose
    neighbouring segment has zero length is kept.
    """
    if len(poly) < 3:
        return

    to_go: List[Point3D] = []
    for a, b, c in consecutive_triples(list(poly), True):
        ab = _direction(a, b)
        bc = _direction(b, c)
        if ab.length() == 0.0 or bc.length() == 0.0:
            continue
        angle = ab.angle(bc)
        if angle < _STRAIGHT_TOLERANCE or angle > math.pi - _STRAIGHT_TOLERANCE:
            to_go.append(b)

    for point in to_go:
        for index, candidate in enumerate(poly):
            if candidate is point:
                del poly[index]
                break