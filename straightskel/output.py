"""Output faces of a skeleton and the edges they share."""

from __future__ import annotations

from typing import List, Optional

from .caching import IdentityLookup
from .containers import GraphMap, LinkedHashSet
from .geometry import Point3D


class SharedEdge:
    """An edge between two points that may border two faces.

    The face on the left sees the edge running from ``end`` to ``start``; the
    face on the right sees it from ``start`` to ``end``. Equality and hashing
    ignore direction.
    """

    def __init__(
        self, start: Optional[Point3D] = None, end: Optional[Point3D] = None
    ) -> None:
        self.start = start
        self.end = end
        self.left: Optional[Face] = None
        self.right: Optional[Face] = None

    def get_start(self, ref: Face) -> Optional[Point3D]:
        """The start point as seen from face ``ref``."""
        if ref is self.left:
            return self.end
        if ref is self.right:
            return self.start
        raise ValueError("face ref not found!")

    def get_end(self, ref: Face) -> Optional[Point3D]:
        """The end point as seen from face ``ref``."""
        if ref is self.left:
            return self.start
        if ref is self.right:
            return self.end
        raise ValueError("face ref not found!")

    def get_other(self, ref: Face) -> Optional[Face]:
        """The face on the opposite side from ``ref``."""
        if ref is self.left:
            return self.right
        if ref is self.right:
            return self.left
        raise ValueError("face ref not found!")

    def set_left(self, start: Point3D, face: Face) -> None:
        """Attach ``face`` to the side that walks the edge from ``start``."""
        if self.start == start:
            self.left = face
        elif self.end == start:
            self.right = face
        else:
            raise ValueError("start point not found!")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SharedEdge):
            return NotImplemented
        if other.start == self.start:
            return other.end == self.end
        if other.end == self.start:
            return other.start == self.end
        return False

    def __hash__(self) -> int:
        value = 7
        value += 71 * (hash(self.start) if self.start is not None else 0)
        value += 71 * (hash(self.end) if self.end is not None else 0)
        return value

    def __str__(self) -> str:
        return f"{{{self.start} to {self.end}}}"

    def __repr__(self) -> str:
        return f"SharedEdge({self.start!r}, {self.end!r})"


class Face:
    """One output polygon, possibly with holes, and the edges bounding it."""

    def __init__(self, owner: Optional[Output] = None) -> None:
        self.owner = owner
        # First loop is the outside, any further loops are holes.
        self.points: Optional[List[List[Point3D]]] = None
        self.defining_se: LinkedHashSet[SharedEdge] = LinkedHashSet()
        self.top_se: LinkedHashSet[SharedEdge] = LinkedHashSet()
        self.parent: Optional[Face] = None
        self.results: GraphMap[Point3D] = GraphMap()
        self.edge = None
        self.defining_corners: LinkedHashSet = LinkedHashSet()
        self.edges: List[List[SharedEdge]] = []

    def point_count(self) -> int:
        """Total number of points over every loop of the face."""
        if self.points is None:
            raise ValueError("pointCount: points are null!")
        return sum(len(loop) for loop in self.points)

    def is_top(self, edge: SharedEdge) -> bool:
        """Whether ``edge`` defines one of the edges above this face."""
        return edge in self.top_se

    def is_bottom(self, edge: SharedEdge) -> bool:
        """Whether ``edge`` is a defining edge of this face."""
        return edge in self.defining_se

    def is_side(self, edge: SharedEdge) -> bool:
        """Whether ``edge`` is neither a top nor a bottom edge."""
        return not (self.is_top(edge) or self.is_bottom(edge))

    def parent_count(self) -> int:
        """Number of faces below this one in the skeleton."""
        count = -1
        face: Optional[Face] = self
        while face is not None:
            count += 1
            face = face.parent
        return count

    def find_shared_edges(self) -> None:
        """Build ``edges`` from ``points``, sharing edges through the owner."""
        self.edges = []
        if self.points is None:
            raise ValueError("findSharedEdges: points are null!")
        if self.owner is None:
            raise ValueError("findSharedEdges: face has no owner!")
        for loop in self.points:
            shared: List[SharedEdge] = []
            size = len(loop)
            for index, point in enumerate(loop):
                following = loop[(index + 1) % size]
                edge = self.owner.create_edge(point, following)
                edge.set_left(point, self)
                shared.append(edge)
            self.edges.append(shared)


class Output:
    """Collects output faces and hands out one shared edge per point pair."""

    def __init__(self) -> None:
        self.faces: dict = {}
        self.edges: IdentityLookup[SharedEdge] = IdentityLookup()

    def create_edge(self, start: Point3D, end: Point3D) -> SharedEdge:
        """Return the canonical edge joining ``start`` and ``end``."""
        return self.edges.get(SharedEdge(start, end))