"""Insertion-ordered sets and maps used to assemble skeleton output."""

from __future__ import annotations

from typing import (
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

T = TypeVar("T", bound=Hashable)
A = TypeVar("A", bound=Hashable)
B = TypeVar("B", bound=Hashable)


class LinkedHashSet(Generic[T]):
    """A set that remembers the order in which items were first added."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: Dict[T, None] = {}
        if items is not None:
            for item in items:
                self.add(item)

    def add(self, item: T) -> None:
        """Append ``item`` unless an equal item is already present."""
        self._items.setdefault(item, None)

    def remove(self, item: T) -> None:
        """Remove ``item`` if present; absent items are ignored."""
        self._items.pop(item, None)

    def first(self) -> T:
        """Return the oldest item still in the set."""
        try:
            return next(iter(self._items))
        except StopIteration:
            raise KeyError("first() on an empty set") from None

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedHashSet):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __hash__(self) -> int:
        return sum(hash(item) for item in self._items)

    def __str__(self) -> str:
        return "{ " + "".join(f"{item}, " for item in self._items) + "}"

    def __repr__(self) -> str:
        return f"LinkedHashSet({list(self._items)!r})"


class BiMap(Generic[A, B]):
    """A two-directional map: ``a -> b`` forwards and ``b -> a`` backwards."""

    def __init__(self) -> None:
        self.ab: Dict[A, B] = {}
        self.ba: Dict[B, A] = {}

    def put(self, a: A, b: B) -> None:
        self.ab[a] = b
        self.ba[b] = a

    def get(self, a: A) -> B:
        """Forward lookup; raises ``KeyError`` when ``a`` is unknown."""
        try:
            return self.ab[a]
        except KeyError:
            raise KeyError("BiMap does not contain key!") from None

    def teg(self, b: B) -> A:
        """Backward lookup; raises ``KeyError`` when ``b`` is unknown."""
        try:
            return self.ba[b]
        except KeyError:
            raise KeyError("BiMap does not contain key!") from None

    def contains_a(self, a: A) -> bool:
        return a in self.ab

    def contains_b(self, b: B) -> bool:
        return b in self.ba

    def remove_a(self, a: A) -> None:
        """Drop the entry keyed by ``a`` in both directions."""
        if a in self.ab:
            self.ba.pop(self.ab[a], None)
        self.ab.pop(a, None)

    def remove_b(self, b: B) -> None:
        """Drop the entry keyed by ``b`` in both directions."""
        if b in self.ba:
            self.ab.pop(self.ba.pop(b), None)

    def clear(self) -> None:
        self.ab.clear()
        self.ba.clear()

    def copy(self) -> BiMap[A, B]:
        """Return a shallow duplicate sharing the stored keys and values."""
        duplicate: BiMap[A, B] = BiMap()
        duplicate.ab.update(self.ab)
        duplicate.ba.update(self.ba)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BiMap):
            return NotImplemented
        return (
            list(self.ab.items()) == list(other.ab.items())
            and list(self.ba.items()) == list(other.ba.items())
        )

    __hash__ = None  # type: ignore[assignment]


class GraphMap(Generic[T]):
    """An undirected adjacency map keeping neighbours in insertion order."""

    def __init__(self) -> None:
        self.map: Dict[T, List[T]] = {}

    def add(self, a: T, b: T) -> None:
        """Connect ``a`` and ``b`` in both directions."""
        self.add_entry(a, b)
        self.add_entry(b, a)

    def add_entry(self, a: T, b: T) -> None:
        """Record ``b`` as a neighbour of ``a`` only."""
        neighbours = self.map.setdefault(a, [])
        if b not in neighbours:
            neighbours.append(b)

    def get(self, a: T) -> Optional[List[T]]:
        """Return the neighbour list of ``a``, or ``None`` if it has none."""
        return self.map.get(a)

    def clear(self) -> None:
        self.map.clear()

    def add_entries_from(self, other: GraphMap[T]) -> None:
        """Copy every directed entry of ``other`` into this map."""
        if other is self:
            return
        for key, neighbours in list(other.map.items()):
            for value in list(neighbours):
                self.add_entry(key, value)

    def remove(self, a: T, b: T) -> None:
        """Disconnect ``a`` and ``b``; keys left without neighbours vanish."""
        self._remove_entry(a, b)
        self._remove_entry(b, a)

    def _remove_entry(self, a: T, b: T) -> None:
        neighbours = self.map.get(a)
        if neighbours is None:
            return
        neighbours.remove(b)
        if not neighbours:
            del self.map[a]

    def __str__(self) -> str:
        lines = []
        for key, neighbours in self.map.items():
            joined = "".join(f"{value}," for value in neighbours)
            lines.append(f"{key} |||   {joined}\n")
        return "".join(lines)


class MultiHashMap(Generic[A, B]):
    """A map from each key to a list of values, keys in insertion order."""

    def __init__(self) -> None:
        self.map: Dict[A, List[B]] = {}

    def add_empty(self, key: A) -> None:
        """Ensure ``key`` is present, with an empty list if it was new."""
        self.map.setdefault(key, [])

    def __len__(self) -> int:
        return len(self.map)

    def __contains__(self, key: object) -> bool:
        return key in self.map

    def __iter__(self) -> Iterator[A]:
        return iter(list(self.map))

    def items(self) -> List[Tuple[A, List[B]]]:
        return list(self.map.items())

    def get(self, key: A) -> List[B]:
        """Return the stored list for ``key``, or a fresh empty list."""
        return self.map.get(key, [])

    def get_or_add(self, key: A) -> List[B]:
        """Return the stored list for ``key``, creating it if needed."""
        return self.map.setdefault(key, [])

    def put(self, key: A, value: B, dupe_check: bool = False) -> None:
        """Append ``value`` under ``key``; with ``dupe_check`` skip duplicates."""
        values = self.map.setdefault(key, [])
        if dupe_check and value in values:
            return
        values.append(value)

    def put_all(self, key: A, values: Iterable[B], dupe_check: bool = False) -> None:
        for value in values:
            self.put(key, value, dupe_check)

    def remove_value(self, key: A, value: B) -> None:
        """Remove one occurrence of ``value`` under ``key``.

        An unknown key is ignored; a value missing from a known key raises
        ``ValueError``.
        """
        values = self.map.get(key)
        if values is None:
            return
        values.remove(value)

    def remove(self, key: A) -> None:
        """Remove the whole list stored under ``key``."""
        self.map.pop(key, None)

    def clear(self) -> None:
        self.map.clear()

    def __str__(self) -> str:
        lines = ["[\n"]
        for key, values in self.map.items():
            joined = "".join(f"{value}, " for value in values)
            lines.append(f"{key} || {joined}\n")
        lines.append("]\n")
        return "".join(lines)


class ManyManyMap(Generic[A, B]):
    """A many-to-many correspondence queried in either direction."""

    def __init__(self) -> None:
        self.forwards: MultiHashMap[A, B] = MultiHashMap()
        self.backwards: MultiHashMap[B, A] = MultiHashMap()

    def add_forwards(self, source: A, target: B) -> None:
        self.forwards.put(source, target)
        self.backwards.put(target, source)

    def get_next(self, source: A) -> List[B]:
        """Targets linked from ``source``, in the order they were added."""
        return list(self.forwards.get(source))

    def get_prev(self, target: B) -> List[A]:
        """Sources linked to ``target``, in the order they were added."""
        return list(self.backwards.get(target))