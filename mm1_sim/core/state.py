"""Mutable state of one simulation run."""

from dataclasses import dataclass, field

from mm1_sim.core.base import Accumulators, Q_LIMIT, ServerStatus
from mm1_sim.core.events import NextEventTable
from mm1_sim.core.queue import WaitingQueue


@dataclass
class SimulationState:
    """Everything a run mutates, owned by the driver and handed to the event handlers."""
    clock: float = 0.0
    time_last_event: float = 0.0
    server_status: ServerStatus = ServerStatus.IDLE
    queue: WaitingQueue = field(default_factory=lambda: WaitingQueue(Q_LIMIT))
    events: NextEventTable = field(default_factory=NextEventTable)
    stats: Accumulators = field(default_factory=Accumulators)

    @property
    def busy(self) -> bool:
        return self.server_status == ServerStatus.BUSY
