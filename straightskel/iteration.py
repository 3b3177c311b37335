"""Walks over neighbouring elements of a sequence, optionally cyclic."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


def consecutive_pairs(items: Iterable[T], loop: bool) -> Iterator[Tuple[T, T]]:
    """Yield each pair of neighbours.

    With ``loop`` the last element is paired with the first; a single element
    then yields one pair of itself.
    """
    values = list(items)
    size = len(values)
    if size == 0 or (size == 1 and not loop):
        return
    count = size if loop else size - 1
    for index in range(count):
        yield values[index], values[(index + 1) % size]


def consecutive_triples(items: Iterable[T], loop: bool) -> Iterator[Tuple[T, T, T]]:
    """Yield each run of three neighbours, wrapping around when ``loop`` is set."""
    values = list(items)
    size = len(values)
    if size == 0 or (not loop and size < 3):
        return
    count = size if loop else size - 2
    for index in range(count):
        yield (
            values[index],
            values[(index + 1) % size],
            values[(index + 2) % size],
        )