from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from .errors import InvalidDirection, InvalidFloor


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    IDLE = "IDLE"

    @property
    def step(self) -> int:
        """Return +1 for up, -1 for down, 0 when idle."""
        if self is Direction.UP:
            return 1
        if self is Direction.DOWN:
            return -1
        return 0

    @classmethod
    def from_step(cls, step: int) -> "Direction":
        if step > 0:
            return cls.UP
        if step < 0:
            return cls.DOWN
        return cls.IDLE


@dataclass(frozen=True)
class Request:
    """A rider's hall call: a floor and the direction they want to travel."""

    request_id: int
    floor: int
    direction: Direction
    created_at: int

    def as_dict(self) -> dict:
        return {
            "id": self.request_id,
            "floor": self.floor,
            "direction": self.direction.value,
            "created_at": self.created_at,
        }


class RequestQueue:
    """Hall calls that have not been matched to a car yet, in arrival order."""

    def __init__(self, num_floors: int) -> None:
        self.num_floors = num_floors
        self._pending: List[Request] = []
        self._next_request_id = 1

    def submit(self, floor: int, direction: Union[Direction, str], created_at: int) -> Request:
        resolved = self.validate(floor, direction)
        request = Request(
            request_id=self._next_request_id,
            floor=floor,
            direction=resolved,
            created_at=created_at,
        )
        self._next_request_id += 1
        self._pending.append(request)
        return request

    def validate(self, floor: int, direction: Union[Direction, str]) -> Direction:
        if isinstance(floor, bool) or not isinstance(floor, int) or not 1 <= floor <= self.num_floors:
            raise InvalidFloor(floor, self.num_floors)
        try:
            resolved = Direction(direction.upper() if isinstance(direction, str) else direction)
        except ValueError:
            raise InvalidDirection(floor, direction) from None
        if resolved is Direction.IDLE:
            raise InvalidDirection(floor, direction)
        if resolved is Direction.UP and floor == self.num_floors:
            raise InvalidDirection(floor, resolved.value)
        if resolved is Direction.DOWN and floor == 1:
            raise InvalidDirection(floor, resolved.value)
        return resolved

    def take(self, request: Request) -> None:
        """Remove a request at the moment it is assigned."""
        self._pending.remove(request)

    def pending(self) -> Tuple[Request, ...]:
        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)
