from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Lightweight view of an elevator for dispatch decisions."""

    elevator_id: int
    floor: int
    direction: int
    status: str
    targets: Sequence[int]

    @property
    def idle(self) -> bool:
        return self.status == "IDLE"

    @property
    def loading(self) -> bool:
        return self.status == "LOADING"


@dataclass(frozen=True)
class PendingRequest:
    """Representation of a pending hall call for schedulers."""

    request_id: int
    floor: int
    direction: int
    requested_at: int


class Scheduler(Protocol):
    """Strategy interface for matching a hall call to an elevator."""

    def select_elevator(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        request: PendingRequest,
    ) -> Optional[int]:
        """
        Return the id of the elevator that should serve ``request``.

        ``None`` means no elevator is currently eligible; the caller keeps
        the request pending and asks again later.
        """
        ...


class DestinationChooser(Protocol):
    """Picks a drop-off floor out of the candidate floors for a call."""

    def __call__(self, candidates: Sequence[int]) -> int:
        ...
