from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class SimulationConfig:
    """Fleet size and timing parameters, fixed when the simulation is built."""

    num_floors: int = 10
    num_elevators: int = 4
    move_duration_per_floor: int = 10
    load_duration: int = 10
    speed_factor: float = 1.0  # wall-clock scaling used by real-time drivers only
    log_capacity: int = 200
    scheduler: str = "nearest_car"
    scheduler_options: Dict[str, Any] = field(default_factory=dict)
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if self.move_duration_per_floor < 1 or self.load_duration < 1:
            raise ValueError("move and load durations must be positive integers")
        if self.speed_factor <= 0:
            raise ValueError("speed_factor must be positive")
        if self.log_capacity < 1:
            raise ValueError("log_capacity must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown simulation settings: {', '.join(sorted(unknown))}")
        return cls(**data)
