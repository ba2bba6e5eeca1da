"""Packages, section buffers and route finding over the warehouse graph."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Optional, Sequence


class Package:
    """A package travelling along a precomputed route of warehouses."""

    def __init__(
        self,
        package_id: int,
        origin: int,
        destination: int,
        posted_at: float,
        route: Iterable[int],
    ) -> None:
        self.package_id = package_id
        self.origin = origin
        self.destination = destination
        self.posted_at = posted_at
        self.current = origin
        self.route = tuple(route)
        self.step = 0

    def __repr__(self) -> str:
        return (
            f"Package(id={self.package_id}, origin={self.origin}, "
            f"destination={self.destination}, current={self.current}, "
            f"route={list(self.route)}, step={self.step})"
        )

    def next_destination(self) -> int:
        """The next warehouse on the route, or the final destination once the route is exhausted."""
        if self.step < len(self.route):
            return self.route[self.step]
        return self.destination

    def advance_route(self) -> None:
        """Move to the next leg of the route; does nothing past its end."""
        if self.step < len(self.route):
            self.step += 1

    def has_arrived(self) -> bool:
        return self.current == self.destination


class SectionPolicy(Enum):
    FIFO = "fifo"
    LIFO = "lifo"


class PackageBuffer:
    """A collection of packages removed either first-in-first-out or last-in-first-out."""

    def __init__(self, policy: SectionPolicy = SectionPolicy.FIFO) -> None:
        self.policy = policy
        self._items: deque[Package] = deque()

    def add(self, package: Package) -> None:
        self._items.append(package)

    def remove(self) -> Optional[Package]:
        """Take the next package according to the policy, or None when empty."""
        if not self._items:
            return None
        if self.policy is SectionPolicy.FIFO:
            return self._items.popleft()
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


def find_route(
    origin: int, destination: int, adjacency: Sequence[Sequence[int]]
) -> Optional[list[int]]:
    """Shortest route from origin to destination by breadth-first search.

    The route lists the warehouses visited after the origin, ending with the
    destination. It is empty when origin and destination coincide and None
    when the destination cannot be reached.
    """
    count = len(adjacency)
    for node in (origin, destination):
        if not 0 <= node < count:
            raise ValueError(f"warehouse {node} is outside 0..{count - 1}")
    if origin == destination:
        return []

    predecessor: dict[int, int] = {}
    visited = {origin}
    queue = deque([origin])
    while queue:
        node = queue.popleft()
        if node == destination:
            break
        for neighbour, linked in enumerate(adjacency[node]):
            if linked == 1 and neighbour not in visited:
                visited.add(neighbour)
                predecessor[neighbour] = node
                queue.append(neighbour)

    if destination not in predecessor:
        return None
    route = []
    node = destination
    while node in predecessor:
        route.append(node)
        node = predecessor[node]
    route.reverse()
    return route


def sort_by_id(packages: Iterable[Package]) -> list[Package]:
    """Packages in ascending order of id; equal ids keep their order."""
    return sorted(packages, key=lambda package: package.package_id)