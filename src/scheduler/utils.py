from __future__ import annotations

from typing import Iterable, List


def direction_between(origin: int, target: int) -> int:
    """Return +1 when ``target`` is above ``origin``, -1 below, 0 when equal."""

    if target > origin:
        return 1
    if target < origin:
        return -1
    return 0


def is_ahead(position: int, floor: int, direction: int) -> bool:
    """Whether ``floor`` lies strictly ahead of ``position`` when travelling in ``direction``."""

    if direction > 0:
        return floor > position
    if direction < 0:
        return floor < position
    return False


def sort_floors_in_direction(floors: Iterable[int], direction: int) -> List[int]:
    """Sort floors to mirror a single sweep in the given direction."""

    return sorted(floors, reverse=direction < 0)


def candidate_destinations(pickup: int, direction: int, num_floors: int) -> List[int]:
    """Floors strictly beyond ``pickup`` in ``direction``, nearest first.

    The pickup floor itself is never a candidate. Returns an empty list when
    the pickup is already at the boundary floor for that direction.
    """

    if direction > 0:
        return list(range(pickup + 1, num_floors + 1))
    if direction < 0:
        return list(range(pickup - 1, 0, -1))
    return []
