from __future__ import annotations


class RequestError(ValueError):
    """A hall call was rejected before it reached the pending queue."""


class InvalidFloor(RequestError):
    def __init__(self, floor: object, num_floors: int) -> None:
        super().__init__(f"Floor {floor} is outside the served range 1..{num_floors}")
        self.floor = floor
        self.num_floors = num_floors


class InvalidDirection(RequestError):
    def __init__(self, floor: int, direction: object) -> None:
        super().__init__(f"Direction {direction} is not available at floor {floor}")
        self.floor = floor
        self.direction = direction


class SimulationStalled(RuntimeError):
    """The fleet did not settle within the allotted number of ticks."""
