"""Simulation primitives for liftsim."""

import logging

from .config import SimulationConfig
from .dispatcher import Dispatcher
from .elevator import CarCall, Elevator, ElevatorStatus, Stop
from .errors import InvalidDirection, InvalidFloor, RequestError, SimulationStalled
from .event_log import EventLog
from .request import Direction, Request, RequestQueue
from .simulation import Simulation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CarCall",
    "Direction",
    "Dispatcher",
    "Elevator",
    "ElevatorStatus",
    "EventLog",
    "InvalidDirection",
    "InvalidFloor",
    "Request",
    "RequestError",
    "RequestQueue",
    "Simulation",
    "SimulationConfig",
    "SimulationStalled",
    "Stop",
]
