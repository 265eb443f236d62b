"""Single-server queueing system simulation package."""

from mm1_sim.core import Q_LIMIT, EmptyEventList, QueueOverflow, RunConfig, SimulationError
from mm1_sim.distributions import SeededUniform, exponential
from mm1_sim.system import RunStatus, SimulationMetrics, SimulationOutcome, SingleServerSystem

__all__ = [
    'Q_LIMIT',
    'EmptyEventList',
    'QueueOverflow',
    'RunConfig',
    'SimulationError',
    'SeededUniform',
    'exponential',
    'RunStatus',
    'SimulationMetrics',
    'SimulationOutcome',
    'SingleServerSystem',
]
