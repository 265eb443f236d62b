"""Shared fixtures for the simulation tests."""

from typing import Iterable, List

import pytest

from mm1_sim.core import RunConfig, SimulationState


class ScriptedUniform:
    """Uniform source that replays fixed values and records how many were drawn."""

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)
        self.draws = 0

    def __call__(self) -> float:
        value = self.values[self.draws]
        self.draws += 1
        return value


@pytest.fixture
def config() -> RunConfig:
    return RunConfig(mean_interarrival=1.0, mean_service=0.5, required_customers=10)


@pytest.fixture
def state() -> SimulationState:
    return SimulationState()
