"""
Post generated ski runs to a running backend.

Each run is a chain of alternating turns, about a second each with a short
traverse in between, followed by a run-out before the run ends.

Usage examples:
  - Against a local server:
      skitrack-simulate --base-url http://localhost:8080 --runs 5
  - Reproducible data:
      skitrack-simulate --runs 3 --turns 12 --seed 42
"""

from __future__ import annotations

import argparse
import datetime as dt
import random
from typing import List, Optional

import httpx

from skitrack.core.constants import DIRECTIONS, SMOOTHNESS_VALUES
from skitrack.core.time_utils import format_rfc3339

# Seconds spent in one turn and between two turns
TURN_SECONDS = (0.9, 1.3)
GAP_SECONDS = (0.2, 0.5)
# Time after the last turn before the run is stopped
RUN_OUT_SECONDS = 10.0


def round2(x: float) -> float:
    return round(x + 1e-9, 2)


def build_run(start: dt.datetime, turn_count: int, rng: random.Random) -> dict:
    """Return {"run": {...}, "turns": [...]} request bodies for one run.

    Turn bodies carry no run_id; it is filled in once the run is created.
    """
    first = rng.randrange(len(DIRECTIONS))
    t = start
    turns: List[dict] = []
    for i in range(turn_count):
        turn_start = t
        turn_end = turn_start + dt.timedelta(seconds=rng.uniform(*TURN_SECONDS))
        turns.append(
            {
                "direction": DIRECTIONS[(first + i) % len(DIRECTIONS)],
                "parallelness": round2(rng.uniform(0.7, 1.0)),
                "closeness": round2(rng.uniform(0.7, 1.0)),
                "smoothness": SMOOTHNESS_VALUES[1] if rng.random() < 0.2 else SMOOTHNESS_VALUES[0],
                "timestamp_start": format_rfc3339(turn_start),
                "timestamp_end": format_rfc3339(turn_end),
            }
        )
        t = turn_end + dt.timedelta(seconds=rng.uniform(*GAP_SECONDS))

    end = t + dt.timedelta(seconds=RUN_OUT_SECONDS)
    return {
        "run": {"start_time": format_rfc3339(start), "end_time": format_rfc3339(end)},
        "turns": turns,
    }


def post_json(client: httpx.Client, path: str, payload: dict) -> int:
    r = client.post(path, json=payload)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")
    return int(r.json())


def post_run(client: httpx.Client, generated: dict) -> int:
    run_id = post_json(client, "/api/runs", generated["run"])
    for turn in generated["turns"]:
        post_json(client, "/api/turns", {**turn, "run_id": run_id})
    return run_id


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Post generated ski runs and turns")
    ap.add_argument("--base-url", default="http://localhost:8080", help="Server URL (without /api)")
    ap.add_argument("--runs", type=int, default=5, help="Number of runs to create")
    ap.add_argument("--turns", type=int, default=8, help="Turns per run")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = ap.parse_args(argv)

    rng = random.Random(args.seed)
    now = dt.datetime.now(dt.timezone.utc).replace(microsecond=0)

    with httpx.Client(base_url=args.base_url, timeout=15) as client:
        # Oldest first, 15 minutes apart, the last one starting now
        for i in range(args.runs):
            start = now - dt.timedelta(minutes=15 * (args.runs - 1 - i))
            run_id = post_run(client, build_run(start, args.turns, rng))
            print(f"Created run {run_id} with {args.turns} turns")

    print(f"Simulation complete: {args.runs} runs created.")


if __name__ == "__main__":
    main()
