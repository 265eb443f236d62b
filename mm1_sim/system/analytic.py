"""Closed-form steady-state results for the M/M/1 queue."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MM1Theory:
    """Steady-state measures of an M/M/1 queue with infinite waiting room."""
    rho: float
    L: float
    Lq: float
    W: float
    Wq: float


def mm1_theoretical_metrics(mean_interarrival: float, mean_service: float) -> MM1Theory:
    """Analytic values to compare against simulated estimates.

    Lq is the long-run average number in queue, Wq the average delay in queue
    and rho the server utilization.
    """
    if mean_interarrival <= 0 or mean_service <= 0:
        raise ValueError("Mean times must be strictly positive.")

    lam = 1.0 / mean_interarrival
    mu = 1.0 / mean_service
    rho = lam / mu
    if rho >= 1.0:
        raise ValueError("Unstable system: rho must be < 1 for M/M/1.")

    L = rho / (1.0 - rho)
    Lq = rho * rho / (1.0 - rho)
    W = L / lam
    Wq = Lq / lam
    return MM1Theory(rho=rho, L=L, Lq=Lq, W=W, Wq=Wq)
