import json
import logging
from pathlib import Path

import pytest

import run_scenario
from simulation.logging_config import LOGGER_NAMES

SCENARIO = {
    "name": "two_calls",
    "simulation": {"num_floors": 6, "num_elevators": 2, "random_seed": 2},
    "duration": 50,
    "summary_interval": 10,
    "requests": [
        {"time": 0, "floor": 1, "direction": "UP"},
        {"time": 3, "floor": 6, "direction": "DOWN"},
        {"time": 4, "floor": 6, "direction": "UP"},
    ],
    "drain": True,
}


def test_build_simulation_uses_scenario_settings():
    simulation = run_scenario.build_simulation(SCENARIO)
    assert simulation.config.num_floors == 6
    assert len(simulation.snapshot()["elevators"]) == 2


def test_run_drains_and_skips_invalid_calls():
    simulation = run_scenario.build_simulation(SCENARIO)
    summaries = run_scenario.run_simulation(simulation, SCENARIO)
    assert [s["time"] for s in summaries[:5]] == [10, 20, 30, 40, 50]
    assert summaries[-1]["pending"] == 0
    assert summaries[-1]["busy_cars"] == 0
    assert "Floor request: floor 6 going UP" not in " ".join(simulation.snapshot()["recent_log"])


def test_main_writes_results(tmp_path: Path, capsys):
    config_path = tmp_path / "scenario.json"
    config_path.write_text(json.dumps(SCENARIO))
    output = tmp_path / "out" / "results.json"

    run_scenario.main([str(config_path), "--output", str(output)])

    results = json.loads(output.read_text())
    assert results["scenario"] == "two_calls"
    assert results["scheduler"] == "nearest_car"
    assert results["final_state"]["pending_requests"] == []
    assert "Scenario: two_calls" in capsys.readouterr().out


def test_unknown_simulation_setting():
    with pytest.raises(ValueError):
        run_scenario.build_simulation({"simulation": {"cars": 3}})


def test_skipped_requests_follow_package_logging(caplog):
    assert run_scenario.logger.name.split(".")[0] in LOGGER_NAMES
    simulation = run_scenario.build_simulation(SCENARIO)
    with caplog.at_level(logging.WARNING, logger="simulation"):
        run_scenario.run_simulation(simulation, {**SCENARIO, "drain": False})
    skipped = [r for r in caplog.records if "Skipping scheduled request" in r.getMessage()]
    assert len(skipped) == 1
    assert skipped[0].name == "simulation.scenario"
