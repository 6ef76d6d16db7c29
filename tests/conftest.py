"""
Shared pytest fixtures for liftsim tests.
"""

import logging

import pytest

from scheduler import first_candidate
from simulation import Simulation, SimulationConfig


@pytest.fixture
def config() -> SimulationConfig:
    return SimulationConfig(
        num_floors=10,
        num_elevators=4,
        move_duration_per_floor=10,
        load_duration=10,
    )


@pytest.fixture
def simulation(config) -> Simulation:
    """Four cars, ten floors, drop-off always the floor next to the pickup."""
    return Simulation(config, destination_chooser=first_candidate)


@pytest.fixture
def single_car() -> Simulation:
    config = SimulationConfig(num_floors=10, num_elevators=1)
    return Simulation(config, destination_chooser=first_candidate)


def car(simulation: Simulation, elevator_id: int) -> dict:
    return simulation.snapshot()["elevators"][elevator_id - 1]


def assert_fleet_invariants(simulation: Simulation) -> None:
    num_floors = simulation.config.num_floors
    for state in simulation.snapshot()["elevators"]:
        queue = state["stop_queue"]
        idle_direction = state["direction"] == "IDLE"
        assert idle_direction == (not queue) == (state["status"] == "IDLE"), state
        if state["direction"] == "UP":
            assert queue == sorted(queue), state
        if state["direction"] == "DOWN":
            assert queue == sorted(queue, reverse=True), state
        assert state["time_remaining"] >= 0, state
        if state["time_remaining"] > 0:
            assert state["status"] in ("MOVING", "LOADING"), state
        assert len(queue) == len(set(queue)), state
        assert 1 <= state["current_floor"] <= num_floors, state


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Keep handlers added by one test from leaking into the next."""
    names = ("simulation", "scheduler", "server")
    yield
    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers[:]:
            if not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)
