"""Bounded FIFO waiting queue."""

from collections import deque
from typing import Deque, Iterator

from mm1_sim.core.base import Q_LIMIT, QueueOverflow


class WaitingQueue:
    """Arrival times of the customers waiting for the server, oldest first."""

    def __init__(self, capacity: int = Q_LIMIT):
        if capacity <= 0:
            raise ValueError("capacity must be > 0.")
        self.capacity = capacity
        self.queue: Deque[float] = deque()

    def append(self, arrival_time: float) -> None:
        """Add a customer at the back; raises QueueOverflow if the queue is full."""
        if len(self.queue) >= self.capacity:
            raise QueueOverflow(arrival_time, self.capacity)
        self.queue.append(arrival_time)

    def popleft(self) -> float:
        """Remove and return the arrival time of the customer at the front."""
        return self.queue.popleft()

    def is_full(self) -> bool:
        return len(self.queue) >= self.capacity

    def __len__(self) -> int:
        return len(self.queue)

    def __iter__(self) -> Iterator[float]:
        return iter(self.queue)
