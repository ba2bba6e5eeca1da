"""Warehouses holding one stacked section per neighbouring warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from rotalog.structures import Package

MAX_PACKAGES_PER_SECTION = 128


@dataclass
class Section:
    """Packages waiting to be sent to one neighbouring warehouse, bottom first."""

    destination: int
    packages: list[Package] = field(default_factory=list)


class Warehouse:
    def __init__(self, warehouse_id: int, neighbours: Iterable[int]) -> None:
        self.warehouse_id = warehouse_id
        self.neighbours = tuple(neighbours)
        self.sections = [Section(neighbour) for neighbour in self.neighbours]

    def __repr__(self) -> str:
        return f"Warehouse(id={self.warehouse_id}, neighbours={list(self.neighbours)})"

    def _section(self, destination: int) -> Optional[Section]:
        return next(
            (section for section in self.sections if section.destination == destination),
            None,
        )

    def receive(self, package: Package) -> bool:
        """Stack the package in the section for its next hop.

        Returns False, keeping nothing, when there is no such section or the
        section is full.
        """
        section = self._section(package.next_destination())
        if section is None or len(section.packages) >= MAX_PACKAGES_PER_SECTION:
            return False
        section.packages.append(package)
        return True

    def take_for_transport(self, destination: int) -> list[Package]:
        """Empty the section for destination, returning its packages top first."""
        section = self._section(destination)
        if section is None:
            return []
        taken = section.packages[::-1]
        section.packages.clear()
        return taken

    def has_packages(self) -> bool:
        return any(section.packages for section in self.sections)