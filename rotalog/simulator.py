"""Discrete-event simulation of packages moving between warehouses."""

from __future__ import annotations

from typing import Optional, Sequence

from rotalog.events import Event, EventType, Scheduler
from rotalog.log import EventLog
from rotalog.structures import Package, sort_by_id
from rotalog.warehouse import Warehouse


class Simulator:
    """Holds the warehouses, the packages and the event queue of one run."""

    def __init__(
        self,
        capacity: int,
        latency: float,
        interval: float,
        removal_cost: float,
        adjacency: Sequence[Sequence[int]],
        log: Optional[EventLog] = None,
    ) -> None:
        self.capacity = capacity
        self.latency = latency
        self.interval = interval
        self.removal_cost = removal_cost
        self.log = log if log is not None else EventLog()
        self.current_time = 0.0
        self.scheduler = Scheduler()
        self.warehouses = [
            Warehouse(index, [column for column, linked in enumerate(row) if linked == 1])
            for index, row in enumerate(adjacency)
        ]
        self.packages: list[Package] = []
        self.delivered = 0

    def run(self) -> None:
        """Process events in order until none remain or every package is delivered."""
        while self.scheduler:
            event = self.scheduler.pop()
            if event.time > self.current_time:
                self.current_time = event.time
            event.process(self)
            if self.all_delivered():
                self.scheduler.clear()
                break

    def schedule(self, event: Event) -> None:
        self.scheduler.schedule(event)

    def add_package(self, package: Package) -> None:
        """Register a package and schedule its arrival at the origin when posted."""
        self.packages.append(package)
        self.schedule(PackageArrival(package.posted_at, package))

    def notify_delivery(self) -> None:
        self.delivered += 1

    def all_delivered(self) -> bool:
        return bool(self.packages) and self.delivered >= len(self.packages)

    def packages_in_warehouses(self) -> bool:
        return any(warehouse.has_packages() for warehouse in self.warehouses)

    def warehouse(self, warehouse_id: int) -> Optional[Warehouse]:
        """The warehouse with this id, or None when there is none."""
        if 0 <= warehouse_id < len(self.warehouses):
            return self.warehouses[warehouse_id]
        return None


class PackageArrival(Event):
    """A package reaches the warehouse recorded as its current one."""

    kind = EventType.PACKAGE_ARRIVAL

    def __init__(self, time: float, package: Package) -> None:
        super().__init__(time)
        self.package = package

    def precedes(self, other: Event) -> bool:
        """Earlier time first; among simultaneous arrivals, lower package id first."""
        if self.time != other.time:
            return self.time < other.time
        if isinstance(other, PackageArrival):
            return self.package.package_id < other.package.package_id
        return False

    def process(self, simulator: Simulator) -> None:
        package = self.package
        here = package.current
        if package.has_arrived():
            simulator.log.delivered(simulator.current_time, package.package_id, here)
            simulator.notify_delivery()
            return
        warehouse = simulator.warehouse(here)
        if warehouse is not None:
            simulator.log.stored(
                simulator.current_time, package.package_id, here, package.next_destination()
            )
            warehouse.receive(package)
        package.advance_route()


class DailyTransport(Event):
    """Empties every section, ships up to capacity per link and restacks the rest."""

    kind = EventType.DAILY_TRANSPORT

    def __init__(self, time: float) -> None:
        super().__init__(time)

    def process(self, simulator: Simulator) -> None:
        if simulator.all_delivered() or not simulator.packages_in_warehouses():
            return
        now = simulator.current_time
        log = simulator.log
        cost = simulator.removal_cost
        limit = max(simulator.capacity, 0)

        for origin in simulator.warehouses:
            for destination in origin.neighbours:
                taken = origin.take_for_transport(destination)
                if not taken:
                    continue
                for position, package in enumerate(taken, start=1):
                    log.removed(
                        now + position * cost, package.package_id, origin.warehouse_id, destination
                    )
                departure = now + len(taken) * cost

                sent = taken[::-1][:limit]
                for package in sent:
                    log.in_transit(departure, package.package_id, origin.warehouse_id, destination)
                    package.current = destination
                    simulator.schedule(PackageArrival(departure + simulator.latency, package))

                for package in sort_by_id(taken[: len(taken) - len(sent)]):
                    log.restored(departure, package.package_id, origin.warehouse_id, destination)
                    origin.receive(package)

        if not simulator.all_delivered():
            simulator.schedule(DailyTransport(simulator.current_time + simulator.interval))