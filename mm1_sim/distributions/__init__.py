"""Random variable distributions for the queueing simulation."""

from .random_variables import (
    SeededUniform,
    UniformSource,
    exponential,
    exponential_distribution,
    exponential_ks_test,
    fit_exponential,
    fixed_uniform,
)

__all__ = [
    'SeededUniform',
    'UniformSource',
    'exponential',
    'exponential_distribution',
    'exponential_ks_test',
    'fit_exponential',
    'fixed_uniform',
]
