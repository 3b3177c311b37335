import pytest

from straightskel.geometry import Point3D
from straightskel.output import Face, Output, SharedEdge


def _square():
    return [
        Point3D(0, 0, 0),
        Point3D(1, 0, 0),
        Point3D(1, 1, 0),
        Point3D(0, 1, 0),
    ]


def test_shared_edge_equality_is_symmetric():
    a, b = Point3D(0, 0, 0), Point3D(1, 2, 3)
    assert SharedEdge(a, b) == SharedEdge(b, a)
    assert SharedEdge(a, b) == SharedEdge(Point3D(0, 0, 0), Point3D(1, 2, 3))
    assert not SharedEdge(a, b) == SharedEdge(a, Point3D(5, 5, 5))


def test_shared_edge_hash_is_symmetric():
    a, b = Point3D(0, 0, 0), Point3D(1, 2, 3)
    assert hash(SharedEdge(a, b)) == hash(SharedEdge(b, a))


def test_shared_edge_str():
    edge = SharedEdge(Point3D(0, 0, 0), Point3D(1, 0, 0))
    assert str(edge) == "{(0, 0, 0) to (1, 0, 0)}"


def test_set_left_and_directional_queries():
    a, b = Point3D(0, 0, 0), Point3D(1, 0, 0)
    edge = SharedEdge(a, b)
    left, right = Face(), Face()
    edge.set_left(a, left)
    edge.set_left(b, right)
    assert edge.left is left
    assert edge.right is right
    assert edge.get_start(left) is b
    assert edge.get_end(left) is a
    assert edge.get_start(right) is a
    assert edge.get_end(right) is b
    assert edge.get_other(left) is right
    assert edge.get_other(right) is left


def test_unknown_face_raises():
    edge = SharedEdge(Point3D(0, 0, 0), Point3D(1, 0, 0))
    edge.set_left(Point3D(0, 0, 0), Face())
    stranger = Face()
    with pytest.raises(ValueError):
        edge.get_start(stranger)
    with pytest.raises(ValueError):
        edge.get_end(stranger)
    with pytest.raises(ValueError):
        edge.get_other(stranger)


def test_set_left_unknown_point_raises():
    edge = SharedEdge(Point3D(0, 0, 0), Point3D(1, 0, 0))
    with pytest.raises(ValueError):
        edge.set_left(Point3D(9, 9, 9), Face())


def test_parent_count():
    base = Face()
    middle = Face()
    middle.parent = base
    top = Face()
    top.parent = middle
    assert base.parent_count() == 0
    assert top.parent_count() == 2


def test_top_bottom_side():
    face = Face()
    bottom = SharedEdge(Point3D(0, 0, 0), Point3D(1, 0, 0))
    top = SharedEdge(Point3D(0, 0, 1), Point3D(1, 0, 1))
    side = SharedEdge(Point3D(0, 0, 0), Point3D(0, 0, 1))
    face.defining_se.add(bottom)
    face.top_se.add(top)
    assert face.is_bottom(SharedEdge(Point3D(1, 0, 0), Point3D(0, 0, 0)))
    assert face.is_top(top)
    assert not face.is_side(top)
    assert face.is_side(side)


def test_point_count():
    face = Face()
    with pytest.raises(ValueError):
        face.point_count()
    face.points = [_square(), _square()[:3]]
    assert face.point_count() == 7


def test_create_edge_is_canonical():
    output = Output()
    a, b = Point3D(0, 0, 0), Point3D(1, 0, 0)
    first = output.create_edge(a, b)
    assert output.create_edge(b, a) is first
    assert output.create_edge(Point3D(0, 0, 0), Point3D(1, 0, 0)) is first


def test_find_shared_edges_builds_loops():
    output = Output()
    face = Face(output)
    face.points = [_square()]
    face.find_shared_edges()
    assert len(face.edges) == 1
    loop = face.edges[0]
    assert len(loop) == len(face.points[0])
    for point, edge in zip(face.points[0], loop):
        assert edge.left is face
        assert edge.get_end(face) == point


def test_neighbouring_faces_share_edge():
    output = Output()
    first = Face(output)
    first.points = [_square()]
    second = Face(output)
    second.points = [[Point3D(1, 0, 0), Point3D(0, 0, 0), Point3D(0, -1, 0)]]
    first.find_shared_edges()
    second.find_shared_edges()
    shared = first.edges[0][0]
    assert second.edges[0][0] is shared
    assert shared.get_other(first) is second
    assert shared.get_other(second) is first


def test_find_shared_edges_without_points_raises():
    face = Face(Output())
    with pytest.raises(ValueError):
        face.find_shared_edges()
    assert face.edges == []