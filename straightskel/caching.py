"""Memoising lookups keyed by value."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Cache(ABC, Generic[K, V]):
    """Create a value for a key on first request and remember it."""

    def __init__(self) -> None:
        self.cache: Dict[K, V] = {}

    def get(self, key: K) -> V:
        if key not in self.cache:
            self.cache[key] = self.create(key)
        return self.cache[key]

    @abstractmethod
    def create(self, key: K) -> V:
        """Build the value stored for ``key``."""

    def put(self, key: K, value: V) -> None:
        self.cache[key] = value


class IdentityLookup(Generic[K]):
    """Map every value to the first equal instance seen."""

    def __init__(self) -> None:
        self.map: Dict[K, K] = {}

    def put(self, item: K) -> None:
        self.map[item] = item

    def get(self, item: K) -> K:
        """Return the canonical instance equal to ``item``, registering it if new."""
        if item not in self.map:
            self.put(item)
        return self.map[item]