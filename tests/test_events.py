import random

import pytest

from rotalog.events import Event, EventType, Scheduler


class _Marker(Event):
    kind = EventType.DAILY_TRANSPORT

    def __init__(self, time, label=None):
        super().__init__(time)
        self.label = label

    def process(self, simulator):
        simulator.append(self.label)


class _Ranked(_Marker):
    def precedes(self, other):
        if self.time != other.time:
            return self.time < other.time
        if isinstance(other, _Ranked):
            return self.label < other.label
        return False


def _drain(scheduler):
    out = []
    while scheduler:
        out.append(scheduler.pop())
    return out


def test_event_ids_increase():
    scheduler = Scheduler()
    scheduler.schedule(_Marker(1.0, "first"))
    scheduler.schedule(_Marker(1.0, "second"))
    first = scheduler.pop()
    second = scheduler.pop()
    assert first.label == "first"
    assert second.event_id > first.event_id


def test_process_acts_on_simulator():
    seen = []
    scheduler = Scheduler()
    scheduler.schedule(_Marker(0.0, "hello"))
    scheduler.pop().process(seen)
    assert seen == ["hello"]


def test_precedes_by_time_only():
    early, late = _Marker(1.0), _Marker(2.0)
    assert Event.precedes(early, late)
    assert not Event.precedes(late, early)
    assert not Event.precedes(_Marker(1.0), _Marker(1.0))


def test_pop_in_time_order():
    rng = random.Random(7)
    times = [rng.uniform(0, 100) for _ in range(200)]
    scheduler = Scheduler()
    for time in times:
        scheduler.schedule(_Marker(time))
    assert len(scheduler) == len(times)
    assert [event.time for event in _drain(scheduler)] == sorted(times)
    assert len(scheduler) == 0


def test_ties_broken_by_precedes():
    scheduler = Scheduler()
    labels = [5, 2, 9, 1, 3]
    for label in labels:
        scheduler.schedule(_Ranked(4.0, label))
    assert [event.label for event in _drain(scheduler)] == sorted(labels)


def test_equal_events_pair_keeps_schedule_order():
    scheduler = Scheduler()
    first, second = _Marker(3.0, "a"), _Marker(3.0, "b")
    scheduler.schedule(first)
    scheduler.schedule(second)
    assert scheduler.pop() is first
    assert scheduler.pop() is second


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Scheduler().pop()


def test_clear_empties():
    scheduler = Scheduler()
    for time in range(5):
        scheduler.schedule(_Marker(float(time)))
    scheduler.clear()
    assert not scheduler
    assert len(scheduler) == 0