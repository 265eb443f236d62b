"""
Random variate generation for the queueing simulation.

Every draw of a run comes from a single uniform source, so a run is fully
determined by the seed and the order in which the draws are made.
"""

from typing import Callable, Optional, Sequence

import numpy as np
from scipy import stats

UniformSource = Callable[[], float]


class SeededUniform:
    """Uniform(0, 1] source backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def __call__(self) -> float:
        # Generator.random() is on [0, 1); flip it so log(u) stays finite.
        return 1.0 - float(self.rng.random())


def fixed_uniform(value: float) -> UniformSource:
    """Create a source that returns the same value on every draw."""
    if not 0.0 < value <= 1.0:
        raise ValueError("value must lie in (0, 1].")
    return lambda: value


def exponential(mean: float, uniform: UniformSource) -> float:
    """Generate an exponential random variable with the given mean."""
    # Adding 0.0 turns -0.0 (from u == 1) into 0.0
    return float(-mean * np.log(uniform())) + 0.0


def exponential_distribution(mean: float, uniform: UniformSource) -> Callable[[], float]:
    """Create an exponential distribution function drawing from `uniform`."""
    return lambda: exponential(mean, uniform)


# Utility functions
def fit_exponential(data: Sequence[float]) -> float:
    """Fit exponential distribution to data and return its mean."""
    return float(np.mean(data))


def exponential_ks_test(data: Sequence[float], mean: float) -> float:
    """
    Kolmogorov-Smirnov test of data against an exponential distribution.

    Args:
        data: Sample data
        mean: Mean of the reference exponential distribution

    Returns:
        p-value of the test
    """
    result = stats.kstest(np.asarray(data, dtype=float), 'expon', args=(0, mean))
    return float(result.pvalue)
