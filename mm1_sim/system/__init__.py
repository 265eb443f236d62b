"""Simulation engine of the single-server queueing system."""

from .analytic import MM1Theory, mm1_theoretical_metrics
from .handlers import arrive, depart
from .queueing_system import RunStatus, SimulationMetrics, SimulationOutcome, SingleServerSystem

__all__ = [
    'MM1Theory',
    'mm1_theoretical_metrics',
    'arrive',
    'depart',
    'RunStatus',
    'SimulationMetrics',
    'SimulationOutcome',
    'SingleServerSystem',
]
