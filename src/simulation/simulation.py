from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Union

from scheduler import DestinationChooser, RandomDestination, Scheduler, get_scheduler

from .config import SimulationConfig
from .dispatcher import Dispatcher
from .elevator import Elevator
from .errors import SimulationStalled
from .event_log import EventLog
from .request import Direction, Request, RequestQueue

logger = logging.getLogger(__name__)


class Simulation:
    """Time-stepped elevator fleet driven by ``submit`` and ``advance``.

    The simulation never sleeps or schedules work on its own. A test calls
    ``advance`` directly; a real-time driver calls it on a wall-clock interval.
    Both entry points mutate shared state and must not run concurrently.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        scheduler: Optional[Scheduler] = None,
        destination_chooser: Optional[DestinationChooser] = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.random = random.Random(self.config.random_seed)
        self.current_time: int = 0
        self.scheduler_name = self.config.scheduler
        self.event_log = EventLog(self.config.log_capacity)
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self.requests = RequestQueue(self.config.num_floors)
        self._elevators = [
            Elevator(
                elevator_id=i + 1,
                move_duration_per_floor=self.config.move_duration_per_floor,
                load_duration=self.config.load_duration,
            )
            for i in range(self.config.num_elevators)
        ]
        self.dispatcher = Dispatcher(
            scheduler or get_scheduler(self.config.scheduler, **self.config.scheduler_options),
            num_floors=self.config.num_floors,
            destination_chooser=destination_chooser or RandomDestination(rng=self.random),
        )
        self.event_log.subscribe(lambda line: self._emit("log", line))

    def set_scheduler(self, name: str, **options) -> None:
        self.dispatcher.scheduler = get_scheduler(name, **options)
        self.scheduler_name = name
        logger.info("Scheduler switched to %s %s", name, options)

    def submit(self, floor: int, direction: Union[Direction, str]) -> Request:
        request = self.requests.submit(floor, direction, created_at=self.current_time)
        self.log(f"Floor request: floor {floor} going {request.direction.value}")
        self._dispatch()
        return request

    def random_request(self) -> Request:
        floor = self.random.randint(1, self.config.num_floors)
        if floor == 1:
            direction = Direction.UP
        elif floor == self.config.num_floors:
            direction = Direction.DOWN
        else:
            direction = self.random.choice([Direction.UP, Direction.DOWN])
        return self.submit(floor, direction)

    def advance(self) -> None:
        self.current_time += 1

        # Cars started by a dispatch during this tick begin counting down on the next one.
        busy = [e for e in self._elevators if e.time_remaining > 0]
        for elevator in busy:
            became_idle = elevator.step(self.log)
            if became_idle and self.requests:
                self._dispatch()

        if self.requests and any(e.idle for e in self._elevators):
            self._dispatch()

        # Busy cars that have moved on may now have the remaining calls ahead of them.
        if self.requests:
            self._dispatch()
        self._emit("tick", self.current_time)

    def run(self, duration: int) -> None:
        for _ in range(duration):
            self.advance()

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        """Advance until every car is idle and nothing is pending; return ticks used."""
        for ticks in range(max_ticks):
            if self.is_idle():
                return ticks
            self.advance()
        if self.is_idle():
            return max_ticks
        raise SimulationStalled(f"Fleet still busy after {max_ticks} ticks")

    def is_idle(self) -> bool:
        return not self.requests and all(e.idle for e in self._elevators)

    def snapshot(self) -> dict:
        return {
            "time": self.current_time,
            "elevators": [elevator.as_dict() for elevator in self._elevators],
            "pending_requests": [request.as_dict() for request in self.requests.pending()],
            "recent_log": list(self.event_log.recent()),
        }

    def log(self, message: str) -> None:
        self.event_log.record(self.current_time, message)

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _dispatch(self) -> None:
        self.dispatcher.dispatch(self._elevators, self.requests, self.log)

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
