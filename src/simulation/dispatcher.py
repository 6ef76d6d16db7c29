from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from scheduler import DestinationChooser, PendingRequest, RandomDestination, Scheduler
from scheduler.utils import candidate_destinations, direction_between

from .elevator import CarCall, Elevator
from .request import Direction, Request, RequestQueue

logger = logging.getLogger(__name__)


class Dispatcher:
    """Matches pending hall calls to cars and commits the resulting stops.

    The scheduler only decides *which* car; the dispatcher owns the side
    effects: taking the request off the queue, choosing a drop-off floor,
    updating the car's stops and starting an idle car.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        num_floors: int,
        destination_chooser: Optional[DestinationChooser] = None,
    ) -> None:
        self.scheduler = scheduler
        self.num_floors = num_floors
        self.destination_chooser = destination_chooser or RandomDestination()

    def dispatch(
        self,
        elevators: Sequence[Elevator],
        queue: RequestQueue,
        log: Callable[[str], None],
    ) -> List[Request]:
        """Offer every pending request, oldest first, to the fleet.

        Each assignment is committed before the next request is considered,
        so later requests see the updated car states. Requests with no
        eligible car stay queued.
        """
        assigned: List[Request] = []
        for request in queue.pending():
            elevator = self._select(elevators, request)
            if elevator is None:
                logger.debug("No eligible car for request %s at floor %s", request.request_id, request.floor)
                continue
            queue.take(request)
            self.assign(elevator, request, log)
            assigned.append(request)
        return assigned

    def assign(self, elevator: Elevator, request: Request, log: Callable[[str], None]) -> Optional[int]:
        pickup = request.floor
        drop = self.choose_drop_off(pickup, request.direction)

        if drop is None:
            log(f"Car {elevator.elevator_id} assigned: pickup at floor {pickup}")
        else:
            log(f"Car {elevator.elevator_id} assigned: pickup at floor {pickup}, drop at floor {drop}")

        if not elevator.idle:
            elevator.add_stops([pickup, drop])
            return drop

        approach = direction_between(elevator.current_floor, pickup)
        if approach in (0, request.direction.step):
            elevator.add_stops([pickup, drop], direction=request.direction)
        else:
            # The car has to travel against the call to reach it: the drop-off
            # waits on the car until the rider is aboard.
            elevator.add_stops([pickup], direction=Direction.from_step(approach))
            if drop is not None:
                elevator.hold(CarCall(origin=pickup, destination=drop))
        elevator.start(log)
        return drop

    def choose_drop_off(self, pickup: int, direction: Direction) -> Optional[int]:
        candidates = candidate_destinations(pickup, direction.step, self.num_floors)
        if not candidates:
            return None
        return self.destination_chooser(candidates)

    def _select(self, elevators: Sequence[Elevator], request: Request) -> Optional[Elevator]:
        pending = PendingRequest(
            request_id=request.request_id,
            floor=request.floor,
            direction=request.direction.step,
            requested_at=request.created_at,
        )
        chosen_id = self.scheduler.select_elevator([e.to_snapshot() for e in elevators], pending)
        if chosen_id is None:
            return None
        for elevator in elevators:
            if elevator.elevator_id == chosen_id:
                return elevator
        raise LookupError(f"Scheduler chose unknown elevator {chosen_id}")
