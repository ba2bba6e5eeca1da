"""Simulation events and the priority queue that orders them."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar


class EventType(Enum):
    PACKAGE_ARRIVAL = "package_arrival"
    DAILY_TRANSPORT = "daily_transport"


class Event(ABC):
    """Something that happens at a point in simulated time."""

    kind: ClassVar[EventType]
    _ids: ClassVar[itertools.count] = itertools.count()

    def __init__(self, time: float) -> None:
        self.time = time
        self.event_id = next(Event._ids)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(time={self.time}, id={self.event_id})"

    @abstractmethod
    def process(self, simulator: Any) -> None:
        """Apply the event to the simulator."""

    def precedes(self, other: Event) -> bool:
        """Whether this event must be handled strictly before the other."""
        return self.time < other.time


class Scheduler:
    """A binary min-heap of events ordered by Event.precedes."""

    def __init__(self) -> None:
        self._heap: list[Event] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def schedule(self, event: Event) -> None:
        heap = self._heap
        heap.append(event)
        index = len(heap) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not heap[index].precedes(heap[parent]):
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def pop(self) -> Event:
        """Remove and return the earliest event; IndexError when empty."""
        heap = self._heap
        if not heap:
            raise IndexError("pop from an empty scheduler")
        last = heap.pop()
        if not heap:
            return last
        root, heap[0] = heap[0], last
        self._sift_down(0)
        return root

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child].precedes(heap[smallest]):
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def clear(self) -> None:
        self._heap.clear()