"""CLI for running petlift scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import asyncio
import json
import random
from pathlib import Path
from typing import Dict, List, Optional

from petlift import (
    CommandResult,
    ConfigError,
    DispatchEngine,
    ElevatorStatus,
    EngineConfig,
    RiderCategory,
    enable_console_logging,
)


def load_config(path: Path) -> Dict:
    try:
        config = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(config, dict):
        raise ConfigError(f"{path} must hold a JSON object")
    return config


def build_engine(config: Dict) -> DispatchEngine:
    return DispatchEngine(EngineConfig.from_dict(config.get("engine", {})))


def build_requests(config: Dict, num_floors: int) -> List[Dict]:
    """Merge scripted requests with randomly generated ones, ordered by time."""
    requests = [dict(r) for r in config.get("requests", [])]
    random_cfg = config.get("random_requests")
    if random_cfg:
        rng = random.Random(random_cfg.get("seed"))
        interval = random_cfg.get("interval", 1.0)
        for i in range(random_cfg.get("count", 0)):
            origin = rng.randint(1, num_floors)
            destination = rng.choice([f for f in range(1, num_floors + 1) if f != origin])
            requests.append(
                {
                    "at": i * interval,
                    "origin": origin,
                    "destination": destination,
                    "category": int(rng.choice(list(RiderCategory))),
                }
            )
    for request in requests:
        missing = {"origin", "destination", "category"} - set(request)
        if missing:
            raise ConfigError(f"Request {request} is missing {', '.join(sorted(missing))}")
    return sorted(requests, key=lambda r: r.get("at", 0.0))


async def _feed_requests(engine: DispatchEngine, requests: List[Dict], results: List[CommandResult]) -> None:
    loop = asyncio.get_running_loop()
    began = loop.time()
    for request in requests:
        delay = request.get("at", 0.0) - (loop.time() - began)
        if delay > 0:
            await asyncio.sleep(delay)
        results.append(
            await engine.submit_request(request["origin"], request["destination"], request["category"])
        )


async def _print_reports(engine: DispatchEngine, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        print(await engine.report())


async def run_scenario(engine: DispatchEngine, config: Dict) -> Dict:
    requests = build_requests(config, engine.building.num_floors)
    stop_after = config.get("stop_after", 10.0)
    timeout = config.get("timeout", 120.0)
    report_interval = config.get("report_interval")
    results: List[CommandResult] = []

    await engine.launch()
    await engine.start()
    reporter = asyncio.create_task(_print_reports(engine, report_interval)) if report_interval else None
    feeder = asyncio.create_task(_feed_requests(engine, requests, results))
    timed_out = False
    try:
        await asyncio.sleep(stop_after)
        await engine.request_stop()
        await engine.wait_for_status(ElevatorStatus.OFFLINE, timeout=timeout)
    except asyncio.TimeoutError:
        timed_out = True
    finally:
        feeder.cancel()
        if reporter:
            reporter.cancel()
        await asyncio.gather(feeder, *([reporter] if reporter else []), return_exceptions=True)

    final_report = await engine.report()
    final_state = await engine.snapshot()
    discarded = await engine.shutdown()
    return {
        "scenario": config.get("name"),
        "description": config.get("description"),
        "submitted": len(results),
        "rejected": sum(1 for r in results if not r.ok),
        "timed_out": timed_out,
        "discarded": discarded,
        "final_state": final_state,
        "final_report": final_report,
    }


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the scenario summary as JSON",
    )
    parser.add_argument("--log-level", help="Enable console logging at this level (e.g. INFO, DEBUG)")
    args = parser.parse_args()

    if args.log_level:
        enable_console_logging(args.log_level)

    try:
        config = load_config(args.config)
        engine = build_engine(config)
        results = asyncio.run(run_scenario(engine, config))
    except ConfigError as exc:
        parser.error(str(exc))
    results["scenario"] = results["scenario"] or args.config.stem

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Requests submitted: {results['submitted']} ({results['rejected']} rejected)")
    if results["timed_out"]:
        print("Elevator did not go offline before the timeout")
    print(results["final_report"], end="")
    if args.output:
        print(f"Saved summary to {args.output}")


if __name__ == "__main__":
    main()
