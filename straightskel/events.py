"""Events that fire when the sweep plane reaches a given height."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List


class HeightEvent(ABC):
    """Something that happens to a skeleton at a particular height."""

    @abstractmethod
    def height(self) -> float:
        """The height at which the event takes place."""

    @abstractmethod
    def process(self, skeleton: Any) -> bool:
        """Apply the event to ``skeleton``; return whether it took any action."""


def sort_height_events(events: Iterable[HeightEvent]) -> List[HeightEvent]:
    """Return the events ordered from the highest to the lowest.

    Events of equal height keep their relative order.
    """
    return sorted(events, key=lambda event: event.height(), reverse=True)