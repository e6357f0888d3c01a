"""Output formatters for courtrota schedules."""

import csv
import json
from io import StringIO
from pathlib import Path

from courtrota.models import RoundResult, ScheduleResult


def format_round(rnd: RoundResult) -> str:
    """One round as text: header, one line per court, then who rests."""
    lines = [f"Round {rnd.round_number}/{rnd.total_rounds}"]
    for court in rnd.courts:
        lines.append(
            f"  Court {court.court_number}: "
            f"{', '.join(court.team_a)} vs {', '.join(court.team_b)}"
        )
    if rnd.rests:
        lines.append(f"  Rest: {', '.join(rnd.rests)}")
    return "\n".join(lines)


def format_summary(result: ScheduleResult) -> str:
    return (
        f"Seed: {result.seed}  "
        f"Spread: {result.max_played_minus_min_played}  "
        f"Rest exceptions: {result.total_consecutive_rest_exceptions}"
    )


def format_schedule(result: ScheduleResult, title: str = "") -> str:
    """Format schedule as human-readable text, round by round."""
    lines = []
    lines.append("=" * 60)
    lines.append(title.upper() if title else "COURT SCHEDULE")
    lines.append(format_summary(result))
    lines.append("=" * 60)
    for rnd in result.rounds:
        lines.append("")
        lines.append(format_round(rnd))
    return "\n".join(lines)


def format_schedule_csv(result: ScheduleResult) -> str:
    """Format schedule as CSV, one row per court.

    Columns: Round, Court, Team_A, Team_B, Rest. Teammates are joined with
    " / "; the resting players are listed on the first court row of the
    round.
    """
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["Round", "Court", "Team_A", "Team_B", "Rest"])

    for rnd in result.rounds:
        rest = " / ".join(rnd.rests)
        for i, court in enumerate(rnd.courts):
            writer.writerow([
                rnd.round_number,
                court.court_number,
                " / ".join(court.team_a),
                " / ".join(court.team_b),
                rest if i == 0 else "",
            ])

    return output.getvalue()


def format_schedule_json(result: ScheduleResult) -> str:
    return json.dumps(result.to_dict(), indent=2) + "\n"


def write_schedule(result: ScheduleResult, output_prefix: str = "output",
                   title: str = "") -> list[Path]:
    """Write all output files into {output_prefix}/ directory."""
    out_dir = Path(output_prefix)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    # Human-readable schedule
    schedule_path = out_dir / "schedule.txt"
    schedule_path.write_text(format_schedule(result, title=title) + "\n")
    print(f"Written: {schedule_path}")
    written.append(schedule_path)

    # Spreadsheet-friendly CSV
    csv_path = out_dir / "schedule.csv"
    csv_path.write_text(format_schedule_csv(result))
    print(f"Written: {csv_path}")
    written.append(csv_path)

    # Full result, re-importable by the verifier
    json_path = out_dir / "schedule.json"
    json_path.write_text(format_schedule_json(result))
    print(f"Written: {json_path}")
    written.append(json_path)

    return written
