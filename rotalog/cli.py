"""Command line entry: read a workload file and print the movement trace."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Sequence, TextIO, TypeVar

from rotalog.log import EventLog
from rotalog.simulator import DailyTransport, Simulator
from rotalog.structures import Package, find_route

T = TypeVar("T")


@dataclass
class Workload:
    """Network parameters and postings read from a workload file.

    Each posting is (posted_at, id_in_file, origin, destination).
    """

    capacity: int
    latency: float
    interval: float
    removal_cost: float
    adjacency: list[list[int]]
    packages: list[tuple[float, int, int, int]] = field(default_factory=list)


def _take(tokens: Iterator[str], convert: Callable[[str], T]) -> T:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("workload ended early") from None
    return convert(token)


def parse_workload(text: str) -> Workload:
    """Parse the whitespace-separated workload format; ValueError when malformed."""
    tokens = iter(text.split())
    capacity = _take(tokens, int)
    latency = _take(tokens, float)
    interval = _take(tokens, float)
    removal_cost = _take(tokens, float)
    count = _take(tokens, int)
    if count < 0:
        raise ValueError(f"negative warehouse count {count}")
    adjacency = [[_take(tokens, int) for _ in range(count)] for _ in range(count)]
    package_count = _take(tokens, int)
    if package_count < 0:
        raise ValueError(f"negative package count {package_count}")
    packages = []
    for _ in range(package_count):
        posted_at = _take(tokens, float)
        _take(tokens, str)
        file_id = _take(tokens, int)
        _take(tokens, str)
        origin = _take(tokens, int)
        _take(tokens, str)
        destination = _take(tokens, int)
        packages.append((posted_at, file_id, origin, destination))
    return Workload(capacity, latency, interval, removal_cost, adjacency, packages)


def simulate(workload: Workload, stream: Optional[TextIO] = None) -> Simulator:
    """Run the workload, writing the trace to stream; returns the finished simulator."""
    simulator = Simulator(
        workload.capacity,
        workload.latency,
        workload.interval,
        workload.removal_cost,
        workload.adjacency,
        EventLog(stream),
    )
    for index, (posted_at, _file_id, origin, destination) in enumerate(workload.packages):
        route = find_route(origin, destination, workload.adjacency)
        if route is None:
            continue
        simulator.add_package(Package(index, origin, destination, posted_at, route))
    if workload.packages:
        first = min(posted_at for posted_at, *_ in workload.packages)
        simulator.schedule(DailyTransport(first + workload.interval))
    simulator.run()
    return simulator


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return 1
    try:
        workload = parse_workload(text)
    except ValueError:
        return 1
    simulate(workload, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())