#!/usr/bin/env python3
"""Scan seeds to find the fairest schedule for a session config.

Ranks seeds by played spread, then rest exceptions, then longest rest run.
Usage: courtrota-scan [config.yaml] [-n COUNT] [--start SEED]
"""

import argparse
import sys
from pathlib import Path

from courtrota.config import load_config
from courtrota.models import ValidationError
from courtrota.scheduler import generate_schedule
from courtrota.stats import compute_stats


def scan_seed(config: dict, seed: int) -> dict:
    """Run a single seed and return summary info."""
    sess = config["session"]
    result = generate_schedule(config["players"], sess["courts"],
                               config["rounds"], seed, sess["match_format"])
    stats = compute_stats(result, config["players"])
    return {
        "seed": seed,
        "spread": result.max_played_minus_min_played,
        "exceptions": result.total_consecutive_rest_exceptions,
        "longest_rest": max(stats["max_consecutive_rest"].values()),
    }


def rank_key(summary: dict) -> tuple:
    return (summary["spread"], summary["exceptions"],
            summary["longest_rest"], summary["seed"])


def main():
    parser = argparse.ArgumentParser(
        description="Scan seeds to find the fairest court schedule",
    )
    parser.add_argument(
        "config", nargs="?", default="config.yaml",
        help="Path to config YAML file (default: config.yaml)"
    )
    parser.add_argument(
        "-n", "--count", type=int, default=100,
        help="Number of seeds to try (default: 100)"
    )
    parser.add_argument(
        "--start", type=int, default=0,
        help="First seed to try (default: 0)"
    )
    args = parser.parse_args()

    config_path = args.config
    if not Path(config_path).exists():
        print(f"Error: config file {config_path} not found")
        sys.exit(1)

    try:
        config = load_config(config_path)
        # Fail once up front instead of on every seed
        scan_seed(config, args.start)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    last = args.start + args.count - 1
    print(f"Scanning seeds {args.start}..{last} using {config_path}...")
    print(f"{'Seed':>8}  {'Spread':>6}  {'Except':>6}  {'MaxRest':>7}")
    print("-" * 36)

    results = []
    for seed in range(args.start, args.start + args.count):
        summary = scan_seed(config, seed)
        results.append(summary)
        print(f"{seed:>8}  {summary['spread']:>6}  {summary['exceptions']:>6}  "
              f"{summary['longest_rest']:>7}", flush=True)

    print("-" * 36)
    if not results:
        print("\nNo seeds scanned")
        sys.exit(1)

    best = min(results, key=rank_key)
    best_seeds = [r["seed"] for r in results if rank_key(r)[:3] == rank_key(best)[:3]]
    print(f"\nBest seeds ({len(best_seeds)}/{len(results)}): "
          f"{', '.join(str(s) for s in best_seeds)}")
    print(f"  spread={best['spread']} exceptions={best['exceptions']} "
          f"max rest run={best['longest_rest']}")


if __name__ == "__main__":
    main()
