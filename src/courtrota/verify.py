"""Standalone verifier for courtrota schedules.

Validates a schedule.json export against the roster and courts in a config.
Usage: courtrota-verify <schedule.json> [config.yaml]
"""

import json
import sys
from pathlib import Path

from courtrota.config import load_config
from courtrota.constraints import validate_schedule, format_validation_report
from courtrota.models import ScheduleResult, ValidationError
from courtrota.stats import compute_stats, format_stats_report


def parse_json_schedule(json_path: str | Path) -> ScheduleResult:
    """Read a schedule.json written by write_schedule back into a result."""
    try:
        with open(json_path) as f:
            return ScheduleResult.from_dict(json.load(f))
    except OSError as e:
        raise ValidationError(f"cannot read {json_path}: {e.strerror or e}") from e
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"{json_path} is not a schedule export: {e}") from e


def verify_file(json_path: str | Path, config: dict) -> bool:
    """Print validation and stats reports for a schedule file. True if valid."""
    print(f"Verifying schedule from {json_path}...")
    try:
        result = parse_json_schedule(json_path)
    except ValidationError as e:
        print(f"Error: {e}")
        return False
    print(f"Loaded {len(result.rounds)} rounds (seed={result.seed})")

    sess = config["session"]
    validation = validate_schedule(result, config["players"], sess["courts"],
                                   sess["match_format"])
    print(format_validation_report(validation))

    stats = compute_stats(result, config["players"])
    print("\n" + format_stats_report(stats))
    return validation["valid"]


def main():
    if len(sys.argv) < 2:
        print("Usage: courtrota-verify <schedule.json> [config.yaml]")
        print("  Validates a schedule export against the roster in config.")
        sys.exit(1)

    json_path = sys.argv[1]
    config_path = sys.argv[2] if len(sys.argv) > 2 else "config.yaml"

    if not Path(json_path).exists():
        print(f"Error: {json_path} not found")
        sys.exit(1)
    if not Path(config_path).exists():
        print(f"Error: {config_path} not found")
        sys.exit(1)

    print(f"Loading config from {config_path}...")
    try:
        config = load_config(config_path)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    sys.exit(0 if verify_file(json_path, config) else 1)


if __name__ == "__main__":
    main()
