"""Data models for in-flight lookup requests."""

from dataclasses import dataclass, field
from enum import Enum


class RequestState(Enum):
    """Lifecycle of a single lookup request."""

    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    DELIVERED = "delivered"
    SUPERSEDED = "superseded"


@dataclass(eq=False)
class LookupRequest:
    """Context object for one submitted search, created fresh per submission.

    Only the UI thread changes the state; workers just carry the object
    back with their outcome.
    """

    sequence: int
    term: str
    state: RequestState = field(default=RequestState.IDLE)

    @property
    def is_in_flight(self) -> bool:
        return self.state is RequestState.IN_FLIGHT

    def __repr__(self) -> str:
        return f"LookupRequest(#{self.sequence}, term='{self.term}', state={self.state.value})"
