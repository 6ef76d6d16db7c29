from __future__ import annotations

from typing import Iterable, Optional

from .interface import ElevatorSnapshot, PendingRequest
from .utils import is_ahead


class NearestCarScheduler:
    """Assigns a hall call to the closest car that can serve it without reversing.

    A car is eligible when it is idle, or when it already travels in the
    call's direction and the call floor lies ahead of it. A car loading at
    the call floor in the call's direction is eligible as well, since the
    rider can join the stop in progress.

    ``serve_moving`` switches the second rule off entirely. ``max_lookahead``
    caps how many floors ahead a busy car will accept a call.
    """

    def __init__(self, serve_moving: bool = True, max_lookahead: Optional[int] = None) -> None:
        if max_lookahead is not None and max_lookahead < 1:
            raise ValueError("max_lookahead must be a positive number of floors")
        self.serve_moving = serve_moving
        self.max_lookahead = max_lookahead

    def select_elevator(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        request: PendingRequest,
    ) -> Optional[int]:
        eligible = [e for e in elevator_state if self.is_eligible(e, request)]
        if not eligible:
            return None
        eligible.sort(key=lambda e: (abs(e.floor - request.floor), e.elevator_id))
        return eligible[0].elevator_id

    def is_eligible(self, elevator: ElevatorSnapshot, request: PendingRequest) -> bool:
        if elevator.idle:
            return True
        if not self.serve_moving or elevator.direction != request.direction:
            return False
        if self.max_lookahead is not None and abs(request.floor - elevator.floor) > self.max_lookahead:
            return False
        if elevator.loading and elevator.floor == request.floor:
            return True
        return is_ahead(elevator.floor, request.floor, elevator.direction)


class NearestIdleScheduler(NearestCarScheduler):
    """Only idle cars are ever offered a call."""

    def __init__(self) -> None:
        super().__init__(serve_moving=False)
