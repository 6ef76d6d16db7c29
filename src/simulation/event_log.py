from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, List, Tuple

logger = logging.getLogger(__name__)


class EventLog:
    """Bounded record of human-readable state changes, stamped with simulated time.

    Lines look like ``[0040s] Car 1 arrived at floor 5``. Only the most recent
    ``capacity`` lines are kept; every line is also forwarded to the module
    logger and to any registered listeners.
    """

    def __init__(self, capacity: int = 200) -> None:
        self.capacity = capacity
        self._entries: Deque[str] = deque(maxlen=capacity)
        self._listeners: List[Callable[[str], None]] = []

    def record(self, time_step: int, message: str) -> str:
        line = f"[{time_step:04d}s] {message}"
        self._entries.append(line)
        logger.info(line)
        for listener in self._listeners:
            listener(line)
        return line

    def subscribe(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)

    def recent(self) -> Tuple[str, ...]:
        return tuple(self._entries)
