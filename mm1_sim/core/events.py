"""Next-event table and the timing selector."""

from dataclasses import dataclass
from typing import Optional, Tuple

from mm1_sim.core.base import EmptyEventList, EventType


@dataclass
class NextEventTable:
    """Scheduled time of the next arrival and departure; None means unscheduled."""
    arrival: Optional[float] = None
    departure: Optional[float] = None

    def schedule(self, event_type: EventType, time: float) -> None:
        """Set the time of the next event of the given kind."""
        if event_type == EventType.ARRIVAL:
            self.arrival = time
        else:
            self.departure = time

    def cancel(self, event_type: EventType) -> None:
        """Remove the next event of the given kind from consideration."""
        if event_type == EventType.ARRIVAL:
            self.arrival = None
        else:
            self.departure = None

    def next_event(self, current_time: float) -> Tuple[float, EventType]:
        """
        Return (time, kind) of the earliest scheduled event.

        An arrival and a departure at the same instant resolve to the arrival.
        Raises EmptyEventList if nothing is scheduled.
        """
        if self.arrival is None and self.departure is None:
            raise EmptyEventList(current_time)
        if self.departure is None:
            return self.arrival, EventType.ARRIVAL
        if self.arrival is None:
            return self.departure, EventType.DEPARTURE
        if self.arrival <= self.departure:
            return self.arrival, EventType.ARRIVAL
        return self.departure, EventType.DEPARTURE
