"""Tests for the arrival and departure handlers on a hand-built state."""

import math

import pytest

from mm1_sim.core import Q_LIMIT, QueueOverflow, ServerStatus
from mm1_sim.system import arrive, depart

from conftest import ScriptedUniform


def test_arrival_to_idle_server_starts_service(state, config):
    state.clock = 2.0
    uniform = ScriptedUniform([0.5, 0.25])

    arrive(state, config, uniform)

    # Interarrival draw first, then the service draw
    assert uniform.draws == 2
    assert state.events.arrival == pytest.approx(2.0 + config.mean_interarrival * math.log(2.0))
    assert state.events.departure == pytest.approx(2.0 + config.mean_service * math.log(4.0))
    assert state.server_status == ServerStatus.BUSY
    assert state.stats.num_delayed == 1
    assert state.stats.total_delay == 0.0
    assert len(state.queue) == 0


def test_arrival_to_busy_server_joins_queue(state, config):
    state.clock = 3.0
    state.server_status = ServerStatus.BUSY
    state.events.departure = 4.0
    uniform = ScriptedUniform([0.5])

    arrive(state, config, uniform)

    assert uniform.draws == 1
    assert list(state.queue) == [3.0]
    assert state.events.departure == 4.0
    assert state.stats.num_delayed == 0


def test_arrival_to_full_queue_overflows(state, config):
    state.clock = 9.0
    state.server_status = ServerStatus.BUSY
    for i in range(Q_LIMIT):
        state.queue.append(float(i))

    with pytest.raises(QueueOverflow) as excinfo:
        arrive(state, config, ScriptedUniform([0.5]))

    assert excinfo.value.sim_time == 9.0
    assert len(state.queue) == Q_LIMIT


def test_departure_with_empty_queue_idles_server(state, config):
    state.clock = 5.0
    state.server_status = ServerStatus.BUSY
    state.events.departure = 5.0
    uniform = ScriptedUniform([])

    depart(state, config, uniform)

    assert uniform.draws == 0
    assert state.server_status == ServerStatus.IDLE
    assert state.events.departure is None
    assert state.stats.num_delayed == 0


def test_departure_with_waiting_customer_starts_next_service(state, config):
    state.clock = 6.0
    state.server_status = ServerStatus.BUSY
    state.queue.append(4.5)
    state.queue.append(5.0)
    uniform = ScriptedUniform([0.5])

    depart(state, config, uniform)

    assert uniform.draws == 1
    assert state.stats.num_delayed == 1
    assert state.stats.total_delay == pytest.approx(1.5)
    assert list(state.queue) == [5.0]
    assert state.server_status == ServerStatus.BUSY
    assert state.events.departure == pytest.approx(6.0 + config.mean_service * math.log(2.0))
