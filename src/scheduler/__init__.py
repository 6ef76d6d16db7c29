from __future__ import annotations

from typing import Dict, Type

from .destinations import RandomDestination, farthest_candidate, first_candidate
from .interface import DestinationChooser, ElevatorSnapshot, PendingRequest, Scheduler
from .nearest_car import NearestCarScheduler, NearestIdleScheduler

__all__ = [
    "DestinationChooser",
    "ElevatorSnapshot",
    "NearestCarScheduler",
    "NearestIdleScheduler",
    "PendingRequest",
    "RandomDestination",
    "Scheduler",
    "farthest_candidate",
    "first_candidate",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "nearest_car": NearestCarScheduler,
    "nearest_idle": NearestIdleScheduler,
}


def get_scheduler(name: str, **kwargs) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValueError(f"Invalid options for scheduler '{name}': {exc}") from exc
