"""CLI for running offline liftsim scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from simulation import RequestError, Simulation, SimulationConfig
from simulation.logging_config import configure_from_env

# Named under the package logger so LIFTSIM_LOGGING covers it when run as __main__.
logger = logging.getLogger("simulation.scenario")


def build_simulation(config: Dict) -> Simulation:
    return Simulation(SimulationConfig.from_dict(config.get("simulation", {})))


def _apply_scheduled_requests(
    simulation: Simulation, requests: Iterable[Dict], current_time: int
) -> None:
    for entry in requests:
        if entry.get("time", 0) != current_time:
            continue
        try:
            simulation.submit(entry.get("floor"), entry.get("direction", ""))
        except RequestError as exc:
            logger.warning("Skipping scheduled request %s: %s", entry, exc)


def _summarise(simulation: Simulation) -> Dict:
    state = simulation.snapshot()
    return {
        "time": state["time"],
        "pending": len(state["pending_requests"]),
        "busy_cars": sum(1 for e in state["elevators"] if e["status"] != "IDLE"),
        "floors": [e["current_floor"] for e in state["elevators"]],
    }


def run_simulation(simulation: Simulation, config: Dict) -> List[Dict]:
    duration = config.get("duration", 300)
    requests = config.get("requests", [])
    random_rate = config.get("random_request_rate", 0.0)
    interval = max(1, config.get("summary_interval", 10))
    summaries: List[Dict] = []

    for _ in range(duration):
        _apply_scheduled_requests(simulation, requests, simulation.current_time)
        if random_rate and simulation.random.random() < random_rate:
            simulation.random_request()
        simulation.advance()
        if simulation.current_time % interval == 0:
            summaries.append(_summarise(simulation))

    if config.get("drain", False):
        simulation.run_until_idle(config.get("drain_limit", 10_000))
        summaries.append(_summarise(simulation))
    return summaries


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the final snapshot and summaries as JSON",
    )
    args = parser.parse_args(argv)
    configure_from_env()

    config = json.loads(args.config.read_text())
    simulation = build_simulation(config)
    summaries = run_simulation(simulation, config)

    final_state = simulation.snapshot()
    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "duration": simulation.current_time,
        "scheduler": simulation.scheduler_name,
        "final_state": final_state,
        "summaries": summaries,
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Scheduler: {results['scheduler']}")
    print(f"Duration: {results['duration']} ticks")
    print("Final cars:")
    for elevator in final_state["elevators"]:
        print(
            f"  Car {elevator['id']}: floor {elevator['current_floor']} "
            f"{elevator['status']} queue={elevator['stop_queue']}"
        )
    print(f"Pending requests: {len(final_state['pending_requests'])}")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
