from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional

from scheduler import ElevatorSnapshot
from scheduler.utils import direction_between, is_ahead, sort_floors_in_direction

from .request import Direction

LogFn = Callable[[str], None]


class ElevatorStatus(str, Enum):
    IDLE = "IDLE"
    MOVING = "MOVING"
    LOADING = "LOADING"


@dataclass(frozen=True)
class Stop:
    floor: int


@dataclass
class CarCall:
    """A drop-off held on the car until its rider boards and the floor lies ahead."""

    origin: int
    destination: int
    boarded: bool = False


@dataclass
class Elevator:
    """One car of the fleet and its IDLE / MOVING / LOADING state machine.

    ``time_remaining`` counts down to the next transition. While moving it
    covers the whole leg to the head stop, and every ``move_duration_per_floor``
    units the car reaches the next floor. The stop being served stays at the
    head of ``stop_queue`` until loading completes.
    """

    elevator_id: int
    move_duration_per_floor: int = 10
    load_duration: int = 10
    current_floor: int = 1
    direction: Direction = Direction.IDLE
    status: ElevatorStatus = ElevatorStatus.IDLE
    time_remaining: int = 0
    stop_queue: List[Stop] = field(default_factory=list)
    car_calls: List[CarCall] = field(default_factory=list)

    @property
    def idle(self) -> bool:
        return self.status is ElevatorStatus.IDLE

    @property
    def floors(self) -> List[int]:
        return [stop.floor for stop in self.stop_queue]

    @property
    def head(self) -> Optional[int]:
        if not self.stop_queue:
            return None
        return self.stop_queue[0].floor

    def add_stops(self, floors: Iterable[Optional[int]], direction: Optional[Direction] = None) -> None:
        """Queue floors not already queued and keep the queue in sweep order.

        An idle car takes ``direction`` as its new direction of travel; a busy
        car keeps its own. A closer stop inserted ahead of a moving car
        shortens the current leg without touching the per-floor cadence.
        """
        if self.direction is Direction.IDLE:
            if direction is None or direction is Direction.IDLE:
                raise ValueError("An idle car needs a direction of travel for new stops")
            self.direction = direction

        previous_head = self.head
        queued = set(self.floors)
        for floor in floors:
            if floor is None or floor in queued:
                continue
            self.stop_queue.append(Stop(floor))
            queued.add(floor)
        self._sort_queue()

        if self.status is ElevatorStatus.MOVING and previous_head is not None and self.head != previous_head:
            self._retarget(previous_head)

    def hold(self, call: CarCall) -> None:
        self.car_calls.append(call)

    def start(self, log: LogFn) -> None:
        """Kick an idle car off toward its first stop."""
        if not self.idle or not self.stop_queue:
            return
        if self.head == self.current_floor:
            self._begin_loading(log)
        else:
            self._depart(log)

    def step(self, log: LogFn) -> bool:
        """Advance one time unit. Returns True when the car has just become idle."""
        if self.time_remaining <= 0:
            return False

        self.time_remaining -= 1
        if self.status is ElevatorStatus.MOVING:
            if self.time_remaining % self.move_duration_per_floor == 0:
                self._arrive(log)
        elif self.status is ElevatorStatus.LOADING and self.time_remaining == 0:
            self._finish_loading(log)
        return self.idle

    def to_snapshot(self) -> ElevatorSnapshot:
        return ElevatorSnapshot(
            elevator_id=self.elevator_id,
            floor=self.current_floor,
            direction=self.direction.step,
            status=self.status.value,
            targets=tuple(self.floors),
        )

    def as_dict(self) -> dict:
        return {
            "id": self.elevator_id,
            "current_floor": self.current_floor,
            "direction": self.direction.value,
            "status": self.status.value,
            "time_remaining": self.time_remaining,
            "stop_queue": self.floors,
            "car_calls": [call.destination for call in self.car_calls],
        }

    def _arrive(self, log: LogFn) -> None:
        self.current_floor += self.direction.step
        log(f"Car {self.elevator_id} arrived at floor {self.current_floor}")
        if self.current_floor == self.head:
            self._begin_loading(log)

    def _begin_loading(self, log: LogFn) -> None:
        self.status = ElevatorStatus.LOADING
        self.time_remaining = self.load_duration
        log(f"Car {self.elevator_id} loading/unloading at floor {self.current_floor}")

    def _finish_loading(self, log: LogFn) -> None:
        floor = self.current_floor
        if self.head == floor:
            self.stop_queue.pop(0)

        # Riders picked up here now have their drop-off registered; riders
        # whose held drop-off is this floor have left the car.
        for call in self.car_calls:
            if call.origin == floor:
                call.boarded = True
        self.car_calls = [c for c in self.car_calls if not (c.boarded and c.destination == floor)]

        if not self.stop_queue:
            boarded = [c for c in self.car_calls if c.boarded]
            if boarded:
                self.direction = Direction.from_step(direction_between(floor, boarded[0].destination))
        self._release_car_calls()

        if not self.stop_queue:
            self.status = ElevatorStatus.IDLE
            self.direction = Direction.IDLE
            self.time_remaining = 0
            log(f"Car {self.elevator_id} is now IDLE at floor {floor}")
            return
        self._depart(log)

    def _depart(self, log: LogFn) -> None:
        target = self.stop_queue[0].floor
        self.direction = Direction.from_step(direction_between(self.current_floor, target))
        self.status = ElevatorStatus.MOVING
        self.time_remaining = abs(target - self.current_floor) * self.move_duration_per_floor
        log(f"Car {self.elevator_id} moving {self.direction.value} to floor {target}")

    def _release_car_calls(self) -> None:
        released: List[int] = []
        held: List[CarCall] = []
        for call in self.car_calls:
            if call.boarded and is_ahead(self.current_floor, call.destination, self.direction.step):
                released.append(call.destination)
            else:
                held.append(call)
        self.car_calls = held
        if released:
            self.add_stops(released)

    def _retarget(self, previous_head: int) -> None:
        leg = self.move_duration_per_floor
        to_next_floor = self.time_remaining - (abs(previous_head - self.current_floor) - 1) * leg
        self.time_remaining = to_next_floor + (abs(self.head - self.current_floor) - 1) * leg

    def _sort_queue(self) -> None:
        ordered = sort_floors_in_direction(self.floors, self.direction.step)
        self.stop_queue = [Stop(floor) for floor in ordered]
