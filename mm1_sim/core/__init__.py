"""Core components of the single-server queueing system."""

from .base import (
    Q_LIMIT,
    Accumulators,
    EmptyEventList,
    EventType,
    QueueOverflow,
    RunConfig,
    ServerStatus,
    SimulationError,
    TraceRecord,
    replay_trace,
)
from .events import NextEventTable
from .queue import WaitingQueue
from .state import SimulationState

__all__ = [
    'Q_LIMIT',
    'Accumulators',
    'EmptyEventList',
    'EventType',
    'QueueOverflow',
    'RunConfig',
    'ServerStatus',
    'SimulationError',
    'TraceRecord',
    'replay_trace',
    'NextEventTable',
    'WaitingQueue',
    'SimulationState',
]
