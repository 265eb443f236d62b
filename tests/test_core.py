"""Tests for the run configuration, accumulators, waiting queue and event table."""

import numpy as np
import pytest

from mm1_sim.core import (
    Q_LIMIT,
    Accumulators,
    EmptyEventList,
    EventType,
    NextEventTable,
    QueueOverflow,
    RunConfig,
    TraceRecord,
    WaitingQueue,
    replay_trace,
)


@pytest.mark.parametrize("kwargs", [
    dict(mean_interarrival=0.0, mean_service=0.5, required_customers=10),
    dict(mean_interarrival=1.0, mean_service=-1.0, required_customers=10),
    dict(mean_interarrival=1.0, mean_service=0.5, required_customers=0),
    dict(mean_interarrival=1.0, mean_service=0.5, required_customers=2.5),
    dict(mean_interarrival=1.0, mean_service=0.5, required_customers=3.0),
    dict(mean_interarrival=1.0, mean_service=0.5, required_customers=True),
    dict(mean_interarrival=float("inf"), mean_service=0.5, required_customers=10),
    dict(mean_interarrival=1.0, mean_service=float("inf"), required_customers=10),
    dict(mean_interarrival=float("nan"), mean_service=0.5, required_customers=10),
])
def test_run_config_rejects_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        RunConfig(**kwargs)


def test_run_config_accepts_numpy_integers():
    config = RunConfig(1.0, 0.5, np.int64(25))
    assert config.required_customers == 25


def test_run_config_is_immutable(config):
    with pytest.raises(AttributeError):
        config.mean_service = 2.0


def test_accumulators_integrate_step_functions():
    stats = Accumulators()
    stats.integrate(2.0, 3, 1)
    stats.integrate(0.5, 0, 0)
    stats.integrate(1.5, 1, 1)
    assert stats.area_num_in_q == pytest.approx(7.5)
    assert stats.area_server_busy == pytest.approx(3.5)
    assert stats.utilization(4.0) == pytest.approx(0.875)
    assert stats.average_number_in_queue(4.0) == pytest.approx(1.875)


def test_accumulators_average_delay():
    stats = Accumulators()
    assert stats.average_delay() == 0.0
    stats.record_delay(0.0)
    stats.record_delay(3.0)
    assert stats.num_delayed == 2
    assert stats.average_delay() == pytest.approx(1.5)


def test_waiting_queue_is_fifo():
    queue = WaitingQueue()
    for t in (1.0, 2.0, 3.0):
        queue.append(t)
    assert queue.popleft() == 1.0
    assert list(queue) == [2.0, 3.0]
    assert len(queue) == 2


def test_waiting_queue_overflow_keeps_length_at_capacity():
    queue = WaitingQueue()
    for i in range(Q_LIMIT):
        queue.append(float(i))
    assert queue.is_full()

    with pytest.raises(QueueOverflow) as excinfo:
        queue.append(123.0)
    assert excinfo.value.sim_time == 123.0
    assert excinfo.value.capacity == Q_LIMIT
    assert len(queue) == Q_LIMIT


def test_next_event_picks_earliest():
    table = NextEventTable(arrival=4.0, departure=2.5)
    assert table.next_event(0.0) == (2.5, EventType.DEPARTURE)
    table.cancel(EventType.DEPARTURE)
    assert table.next_event(0.0) == (4.0, EventType.ARRIVAL)


def test_next_event_tie_goes_to_arrival():
    table = NextEventTable(arrival=3.0, departure=3.0)
    assert table.next_event(1.0) == (3.0, EventType.ARRIVAL)


def test_next_event_with_only_departure():
    table = NextEventTable()
    table.schedule(EventType.DEPARTURE, 1.25)
    assert table.next_event(0.0) == (1.25, EventType.DEPARTURE)


def test_empty_event_list_raises_with_time():
    with pytest.raises(EmptyEventList) as excinfo:
        NextEventTable().next_event(7.5)
    assert excinfo.value.sim_time == 7.5


def test_replay_derives_state_from_event_kinds():
    trace = [
        TraceRecord(EventType.ARRIVAL, 1.0, 1.0),    # idle, empty
        TraceRecord(EventType.ARRIVAL, 0.5, 1.5),    # busy, empty
        TraceRecord(EventType.ARRIVAL, 0.25, 1.75),  # busy, 1 waiting
        TraceRecord(EventType.DEPARTURE, 1.0, 2.75),  # busy, 2 waiting
        TraceRecord(EventType.DEPARTURE, 2.0, 4.75),  # busy, 1 waiting
        TraceRecord(EventType.DEPARTURE, 1.0, 5.75),  # busy, empty
        TraceRecord(EventType.ARRIVAL, 3.0, 8.75),   # idle, empty
    ]
    stats = replay_trace(trace)
    assert stats.area_num_in_q == pytest.approx(0.25 * 1 + 1.0 * 2 + 2.0 * 1)
    assert stats.area_server_busy == pytest.approx(0.5 + 0.25 + 1.0 + 2.0 + 1.0)
