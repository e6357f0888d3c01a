#!/usr/bin/env python3
"""Court rotation schedule builder.

Generate mode (default):
    courtrota [config.yaml] [--seed N] [--regenerate K] [-o DIR]

    Generates a schedule from the YAML config and writes:
      {DIR}/schedule.txt   - Round-by-round court assignments
      {DIR}/schedule.csv   - One row per court, for spreadsheets
      {DIR}/schedule.json  - Full result, re-importable with --verify
      {DIR}/stats.txt      - Validation report + playing-time statistics

Verify mode:
    courtrota --verify <schedule.json> [config.yaml]

    Re-imports a JSON schedule and checks it against the config roster.
    Exit code 0 if valid, 1 if violations found.

Examples:
    courtrota                          # default config, seed from config or clock
    courtrota --seed 42 -o tuesday     # reproducible, custom output dir
    courtrota --seed 42 --regenerate 2 # same as --seed 44
    courtrota --verify output/schedule.json
"""

import argparse
import sys
from pathlib import Path

from courtrota.config import load_config
from courtrota.constraints import validate_schedule, format_validation_report
from courtrota.models import ValidationError
from courtrota.output import format_schedule, write_schedule
from courtrota.session import Session
from courtrota.stats import compute_stats, format_stats_report


def main():
    parser = argparse.ArgumentParser(
        description="Court rotation schedule builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Output files (generate mode):
  {dir}/schedule.txt    Round-by-round court assignments
  {dir}/schedule.csv    One row per court
  {dir}/schedule.json   Full result (for --verify)
  {dir}/stats.txt       Validation report + playing-time statistics

Exit codes:
  0  Schedule generated (or verified) with no hard violations
  1  Invalid input, constraint violations, or missing files
""",
    )
    parser.add_argument(
        "config", nargs="?", default="config.yaml",
        help="Path to config YAML file (default: config.yaml)"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed (overrides the config). The same seed always "
             "gives the same schedule."
    )
    parser.add_argument(
        "--regenerate", type=int, default=0, metavar="K",
        help="Regenerate K times, bumping the seed by one each time"
    )
    parser.add_argument(
        "--output-prefix", "-o", default="output",
        help="Output directory for generated files (default: output/)"
    )
    parser.add_argument(
        "--verify", metavar="JSON",
        help="Verify an existing schedule.json instead of generating"
    )
    args = parser.parse_args()

    config_path = args.config
    if not Path(config_path).exists():
        print(f"Error: config file {config_path} not found")
        sys.exit(1)

    print(f"Loading config from {config_path}...")
    try:
        config = load_config(config_path)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.verify:
        from courtrota.verify import verify_file
        if not Path(args.verify).exists():
            print(f"Error: {args.verify} not found")
            sys.exit(1)
        ok = verify_file(args.verify, config)
        sys.exit(0 if ok else 1)

    sess = config["session"]
    seed = args.seed if args.seed is not None else sess["seed"]
    session = Session(players=config["players"], seed=seed)

    print(f"Generating {config['rounds']} rounds on {sess['courts']} court(s), "
          f"{sess['match_format'].value} (seed={seed})...")
    try:
        result = session.generate(sess["courts"], config["rounds"],
                                  sess["match_format"])
        for _ in range(args.regenerate):
            result = session.regenerate(sess["courts"], config["rounds"],
                                        sess["match_format"])
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.regenerate:
        print(f"Regenerated {args.regenerate} time(s), seed is now {session.seed}")

    print("\n" + format_schedule(result, title=sess["name"]))

    # Validate
    print("\nValidating...")
    validation = validate_schedule(result, config["players"], sess["courts"],
                                   sess["match_format"])
    report = format_validation_report(validation)
    print(report)

    # Stats
    stats_text = format_stats_report(compute_stats(result, config["players"]))
    print("\n" + stats_text)

    # Write outputs
    print("\nWriting output files...")
    write_schedule(result, output_prefix=args.output_prefix, title=sess["name"])

    stats_path = Path(args.output_prefix) / "stats.txt"
    stats_path.write_text(report + "\n\n" + stats_text + "\n")
    print(f"Written: {stats_path}")

    if validation["valid"]:
        print("\nSchedule generated successfully!")
    else:
        print(f"\nSchedule has {len(validation['errors'])} constraint violations.")
        sys.exit(1)


if __name__ == "__main__":
    main()
