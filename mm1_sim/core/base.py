"""Base types for the single-server queueing simulation."""

import math
import numbers
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable

# Waiting-room capacity of the single server
Q_LIMIT = 100


class EventType(str, Enum):
    """Kinds of events held in the next-event table."""
    ARRIVAL = "arrival"
    DEPARTURE = "departure"


class ServerStatus(IntEnum):
    """Server state; the integer value doubles as the busy indicator."""
    IDLE = 0
    BUSY = 1


class SimulationError(Exception):
    """Fatal condition that aborts a simulation run."""

    def __init__(self, message: str, sim_time: float):
        super().__init__(message)
        self.sim_time = sim_time


class QueueOverflow(SimulationError):
    """Raised when an arrival finds the waiting queue already full."""

    def __init__(self, sim_time: float, capacity: int = Q_LIMIT):
        super().__init__(
            f"waiting queue exceeded capacity {capacity} at time {sim_time:f}",
            sim_time)
        self.capacity = capacity


class EmptyEventList(SimulationError):
    """Raised when neither an arrival nor a departure is scheduled."""

    def __init__(self, sim_time: float):
        super().__init__(f"event list empty at time {sim_time:f}", sim_time)


@dataclass(frozen=True)
class RunConfig:
    """Parameters of one simulation run."""
    mean_interarrival: float
    mean_service: float
    required_customers: int

    def __post_init__(self) -> None:
        if not self.mean_interarrival > 0 or not math.isfinite(self.mean_interarrival):
            raise ValueError("mean_interarrival must be finite and > 0.")
        if not self.mean_service > 0 or not math.isfinite(self.mean_service):
            raise ValueError("mean_service must be finite and > 0.")
        if isinstance(self.required_customers, bool) or not isinstance(self.required_customers, numbers.Integral):
            raise ValueError("required_customers must be an integer.")
        if self.required_customers <= 0:
            raise ValueError("required_customers must be > 0.")


@dataclass
class Accumulators:
    """Statistical counters of a run.

    The two areas are the integrals of the number-in-queue and server-busy
    step functions; they only ever grow.
    """
    area_num_in_q: float = 0.0
    area_server_busy: float = 0.0
    total_delay: float = 0.0
    num_delayed: int = 0

    def integrate(self, elapsed: float, num_in_q: int, busy: int) -> None:
        """Add the areas swept by the pre-event state over `elapsed`."""
        self.area_num_in_q += num_in_q * elapsed
        self.area_server_busy += busy * elapsed

    def record_delay(self, delay: float) -> None:
        """Count one customer entering service after waiting `delay`."""
        self.total_delay += delay
        self.num_delayed += 1

    def average_delay(self) -> float:
        """Average delay in queue of the customers counted so far."""
        if self.num_delayed > 0:
            return self.total_delay / self.num_delayed
        return 0.0

    def average_number_in_queue(self, current_time: float) -> float:
        """Time-average number of customers waiting."""
        if current_time > 0:
            return self.area_num_in_q / current_time
        return 0.0

    def utilization(self, current_time: float) -> float:
        """Fraction of simulated time the server was busy."""
        if current_time > 0:
            return self.area_server_busy / current_time
        return 0.0


@dataclass(frozen=True)
class TraceRecord:
    """One processed event: its kind, the time since the previous event and the clock."""
    event_type: EventType
    elapsed: float
    clock: float


def replay_trace(trace: Iterable[TraceRecord]) -> Accumulators:
    """
    Rebuild the time-average areas of a run from its event trace.

    Queue length and server status are derived from the event kinds alone, so
    the result matches the areas accumulated by the driver exactly.
    """
    stats = Accumulators()
    num_in_q = 0
    status = ServerStatus.IDLE

    for record in trace:
        stats.integrate(record.elapsed, num_in_q, int(status))

        if record.event_type == EventType.ARRIVAL:
            if status == ServerStatus.BUSY:
                num_in_q += 1
            else:
                status = ServerStatus.BUSY
        elif num_in_q > 0:
            num_in_q -= 1
        else:
            status = ServerStatus.IDLE

    return stats
