"""Arrival and departure event handlers.

Draw order matters for reproducibility: an arrival always draws its
successor's interarrival time first, and draws a service time only when the
customer goes straight into service.
"""

import logging

from mm1_sim.core.base import EventType, RunConfig, ServerStatus
from mm1_sim.core.state import SimulationState
from mm1_sim.distributions.random_variables import UniformSource, exponential

logger = logging.getLogger(__name__)


def arrive(state: SimulationState, config: RunConfig, uniform: UniformSource) -> None:
    """Process an arrival at the current clock."""
    # Schedule next arrival
    state.events.schedule(EventType.ARRIVAL,
                          state.clock + exponential(config.mean_interarrival, uniform))

    if state.server_status == ServerStatus.BUSY:
        # Raises QueueOverflow when the waiting room is already full
        state.queue.append(state.clock)
        logger.debug("t=%f arrival queued, %d waiting", state.clock, len(state.queue))
        return

    # Server is idle, so the customer has a delay of zero
    state.stats.record_delay(0.0)
    state.server_status = ServerStatus.BUSY
    state.events.schedule(EventType.DEPARTURE,
                          state.clock + exponential(config.mean_service, uniform))
    logger.debug("t=%f arrival served immediately", state.clock)


def depart(state: SimulationState, config: RunConfig, uniform: UniformSource) -> None:
    """Process a service completion at the current clock."""
    if len(state.queue) == 0:
        state.server_status = ServerStatus.IDLE
        state.events.cancel(EventType.DEPARTURE)
        logger.debug("t=%f departure, server idle", state.clock)
        return

    # Front customer enters service
    arrival_time = state.queue.popleft()
    state.stats.record_delay(state.clock - arrival_time)
    state.events.schedule(EventType.DEPARTURE,
                          state.clock + exponential(config.mean_service, uniform))
    logger.debug("t=%f departure, next customer waited %f, %d waiting",
                 state.clock, state.clock - arrival_time, len(state.queue))
