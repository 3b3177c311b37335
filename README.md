# straightskel

Building blocks for computing straight skeletons of polygons: tolerant 3D
geometry, insertion-ordered containers, and the bookkeeping for output faces
and the edges they share.

## What is in the package

- `straightskel.geometry`
  - `is_approx(a, b)` and `is_approx_float(a, b)`: compare numbers with a
    combined absolute and relative tolerance (double and single precision).
  - `Tuple3D`: mutable `x`, `y`, `z` with in-place `add`, `sub` and `scale`,
    an `invalid()` constructor and `is_valid()`. Equality is tolerant and
    includes the validity flag; `<` compares the sums of the components.
  - `Point3D` adds `distance`; `Vector3D` adds `cross` (returns a new vector),
    `dot`, `length`, in-place `normalise` and `angle`.
  - `LineOnPlane`: a `Point3D` start with a `direction` and a `distance`.
- `straightskel.iteration`: `consecutive_pairs(items, loop)` and
  `consecutive_triples(items, loop)` yield neighbouring elements, wrapping
  round the end when `loop` is true.
- `straightskel.caching`
  - `Cache`: an abstract map whose `get` calls the subclass's `create` the
    first time a key is asked for and remembers the result.
  - `IdentityLookup`: returns the first stored instance equal to a value.
- `straightskel.containers`
  - `LinkedHashSet`: a set that keeps insertion order, with `first()`.
  - `BiMap`: a two-way map with `get` (forwards) and `teg` (backwards), both
    raising `KeyError` for unknown keys.
  - `GraphMap`: an undirected adjacency map; `remove` drops keys left with no
    neighbours.
  - `MultiHashMap`: a key to list-of-values map with optional duplicate checks.
  - `ManyManyMap`: a many-to-many correspondence queried with `get_next` and
    `get_prev`.
- `straightskel.output`
  - `SharedEdge`: an edge between two points with a `left` and `right` face;
    equality and hashing ignore direction.
  - `Face`: an output polygon (outer loop first, then holes) with its defining,
    top and side edges, its parent face and a `results` graph;
    `find_shared_edges` turns its point loops into shared edges.
  - `Output`: holds a `faces` dictionary and hands out one canonical
    `SharedEdge` per point pair through `create_edge`.
- `straightskel.events`: the abstract `HeightEvent` (`height()`,
  `process(skeleton)`) and `sort_height_events`, which orders events from
  highest to lowest, keeping ties in order.
- `straightskel.polygons`: `remove_straights(poly)` removes, in place, the
  points of a closed loop where it runs straight on or turns straight back.

## Example

```python
from straightskel.geometry import Point3D, Vector3D
from straightskel.iteration import consecutive_pairs

square = [Point3D(0, 0, 0), Point3D(500, 0, 0), Point3D(500, 300, 0), Point3D(0, 300, 0)]
perimeter = sum(a.distance(b) for a, b in consecutive_pairs(square, loop=True))
print(perimeter)  # 1600.0

v = Vector3D(1, 0, 0)
print(v.angle(Vector3D(0, 1, 0)))  # pi / 2
```

## What the package does not do

It does not run the straight-skeleton sweep itself: there is no skeleton
driver, no collision queue, no concrete height events and no step that builds
face polygons from a face's `results` graph. It has no command-line tool and
reads or writes no files. The pieces here are for building such a program.

## Running the tests

```
pip install -e ".[test]"
pytest
```