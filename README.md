# rotalog

A discrete-event simulator for packages that travel through a network of
warehouses.

Each warehouse keeps one section for each neighbour it connects to. A
section holds at most 128 packages, and a package that does not fit is not
stored. Each package follows the shortest route from its origin to its
destination. The route is found by breadth-first search.

At fixed intervals a transport run empties every section. It takes the
packages off the top of the stack first, and each removal costs a fixed
amount of time. The run then sends packages up to its capacity, starting
from the bottom of the stack. The packages left over go back into the
section in ascending id order. Each step is written as one line of the
trace.

## Installation

```
pip install .
```

## Command line

```
rotalog workload.wkl
```

The trace is printed to standard output. The exit status is 1 in three
cases: the command was not given exactly one argument, the file cannot be
read, or the workload is malformed. Otherwise it is 0.

The workload file holds whitespace-separated values in this order:

1. transport capacity (packages per section per run)
2. transport latency
3. interval between transport runs
4. removal cost per package
5. number of warehouses `N`, then an `N x N` adjacency matrix of `0`/`1`
6. number of packages, then one entry per package:
   `<posting time> pac <id> org <origin> dst <destination>`

Packages are numbered from 0 upwards in the order they appear in the file.
The id written in the file is read but not used. A package with no route to
its destination is dropped. The first transport run happens one interval
after the earliest posting time. The simulation stops as soon as every
package has been delivered.

Example workload:

```
2 20 110 1
3
0 1 0
1 0 1
0 1 0
2
10 pac 0 org 0 dst 2
12 pac 1 org 2 dst 0
```

Its trace:

```
0000010 pacote 000 armazenado em 000 na secao 001
0000012 pacote 001 armazenado em 002 na secao 001
0000121 pacote 000 removido de 000 na secao 001
0000121 pacote 000 em transito de 000 para 001
0000121 pacote 001 removido de 002 na secao 001
0000121 pacote 001 em transito de 002 para 001
0000141 pacote 000 armazenado em 001 na secao 002
0000141 pacote 001 armazenado em 001 na secao 000
0000231 pacote 001 removido de 001 na secao 000
0000231 pacote 001 em transito de 001 para 000
0000231 pacote 000 removido de 001 na secao 002
0000231 pacote 000 em transito de 001 para 002
0000251 pacote 000 entregue em 002
0000251 pacote 001 entregue em 000
```

Each line starts with the time, truncated to an integer and zero-padded to
seven digits. Package and warehouse ids are zero-padded to three digits.

## Library use

```python
import sys
from rotalog.cli import parse_workload, simulate

with open("workload.wkl") as handle:
    workload = parse_workload(handle.read())
simulator = simulate(workload, sys.stdout)
print(simulator.delivered, "delivered")
```

`parse_workload` raises `ValueError` on malformed input. `simulate` returns
the finished `Simulator`.

The pieces can also be used on their own:

- `rotalog.structures.find_route(origin, destination, adjacency)` returns the
  warehouses visited after the origin. It returns an empty list when origin
  and destination coincide, and `None` when the destination cannot be
  reached. `Package`, `PackageBuffer` (FIFO or LIFO by `SectionPolicy`) and
  `sort_by_id` live in the same module.
- `rotalog.warehouse.Warehouse` holds one `Section` per neighbour.
- `rotalog.events.Scheduler` is a min-heap of `Event` objects. Events are
  ordered by time, and arrivals at the same time by package id.
- `rotalog.simulator.Simulator` drives the simulation with `PackageArrival`
  and `DailyTransport` events. It writes its trace to a
  `rotalog.log.EventLog`, which prints to any text stream.

## Tests

```
pip install .[test]
pytest
```