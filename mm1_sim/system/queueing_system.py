"""Single-server queueing system coordinator and simulation engine."""

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from mm1_sim.core import (
    EmptyEventList,
    EventType,
    QueueOverflow,
    RunConfig,
    SimulationError,
    SimulationState,
    TraceRecord,
)
from mm1_sim.distributions.random_variables import SeededUniform, UniformSource, exponential
from mm1_sim.system.handlers import arrive, depart

logger = logging.getLogger(__name__)


class RunStatus(str, Enum):
    """How a run ended."""
    COMPLETED = "completed"
    QUEUE_OVERFLOW = "queue_overflow"
    EMPTY_EVENT_LIST = "empty_event_list"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SimulationMetrics:
    """Performance estimates of a run; `complete` is False for a cancelled run."""
    average_delay_in_queue: float
    average_number_in_queue: float
    server_utilization: float
    simulation_end_time: float
    num_delayed: int
    complete: bool = True

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class SimulationOutcome:
    """Result of SingleServerSystem.simulate()."""
    status: RunStatus
    sim_time: float
    metrics: Optional[SimulationMetrics] = None
    error: Optional[SimulationError] = None
    trace: List[TraceRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == RunStatus.COMPLETED

    def raise_for_status(self) -> None:
        """Re-raise the fatal error of an aborted run."""
        if self.error is not None:
            raise self.error


class SingleServerSystem:
    """Discrete-event simulation of an M/M/1 queue with a bounded waiting room."""

    def __init__(self,
                 config: RunConfig,
                 uniform: Optional[UniformSource] = None,
                 record_trace: bool = False):
        self.config = config
        self.uniform = uniform if uniform is not None else SeededUniform()
        self.record_trace = record_trace
        self.state = SimulationState()
        self.trace: List[TraceRecord] = []

        self._handlers = {
            EventType.ARRIVAL: arrive,
            EventType.DEPARTURE: depart,
        }

    def reset(self) -> None:
        """Initialize the run: empty system, first arrival scheduled."""
        self.state = SimulationState()
        self.trace = []
        # No customers yet, so there is no departure to consider
        self.state.events.schedule(
            EventType.ARRIVAL,
            self.state.clock + exponential(self.config.mean_interarrival, self.uniform))

    def timing(self) -> EventType:
        """Advance the clock to the next event and return its kind."""
        next_time, event_type = self.state.events.next_event(self.state.clock)
        self.state.clock = next_time
        return event_type

    def update_time_avg_stats(self) -> float:
        """Accumulate the areas since the last event; returns the elapsed time."""
        state = self.state
        elapsed = state.clock - state.time_last_event
        state.time_last_event = state.clock
        state.stats.integrate(elapsed, len(state.queue), int(state.server_status))
        return elapsed

    def step(self) -> EventType:
        """Process exactly one event."""
        event_type = self.timing()
        elapsed = self.update_time_avg_stats()
        if self.record_trace:
            self.trace.append(TraceRecord(event_type, elapsed, self.state.clock))
        self._handlers[event_type](self.state, self.config, self.uniform)
        return event_type

    def simulate(self,
                 should_cancel: Optional[Callable[[], bool]] = None,
                 reset: bool = True) -> SimulationOutcome:
        """
        Run until the required number of customers have entered service.

        Args:
            should_cancel: Checked before every event; returning True stops
                the run with partial metrics marked incomplete
            reset: Start from a freshly initialized state

        Returns:
            SimulationOutcome with metrics on completion or cancellation,
            or the fatal error of an aborted run
        """
        if reset:
            self.reset()

        logger.info("Simulating %d customers (mean interarrival %.3f, mean service %.3f)",
                    self.config.required_customers,
                    self.config.mean_interarrival,
                    self.config.mean_service)

        stats = self.state.stats
        try:
            while stats.num_delayed < self.config.required_customers:
                if should_cancel is not None and should_cancel():
                    logger.warning("Simulation cancelled at time %f after %d customers",
                                   self.state.clock, stats.num_delayed)
                    return SimulationOutcome(RunStatus.CANCELLED, self.state.clock,
                                             metrics=self.get_metrics(complete=False),
                                             trace=self.trace)
                self.step()
        except QueueOverflow as exc:
            logger.error("Overflow of the waiting queue at time %f", exc.sim_time)
            return SimulationOutcome(RunStatus.QUEUE_OVERFLOW, exc.sim_time,
                                     error=exc, trace=self.trace)
        except EmptyEventList as exc:
            logger.error("Event list empty at time %f", exc.sim_time)
            return SimulationOutcome(RunStatus.EMPTY_EVENT_LIST, exc.sim_time,
                                     error=exc, trace=self.trace)

        metrics = self.get_metrics()
        logger.info("Simulation ended at time %f", metrics.simulation_end_time)
        return SimulationOutcome(RunStatus.COMPLETED, self.state.clock,
                                 metrics=metrics, trace=self.trace)

    def get_metrics(self, complete: bool = True) -> SimulationMetrics:
        """Compute the performance estimates from the current state."""
        stats = self.state.stats
        clock = self.state.clock
        return SimulationMetrics(
            average_delay_in_queue=stats.average_delay(),
            average_number_in_queue=stats.average_number_in_queue(clock),
            server_utilization=stats.utilization(clock),
            simulation_end_time=clock,
            num_delayed=stats.num_delayed,
            complete=complete,
        )
