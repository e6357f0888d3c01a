"""Constraint validation for courtrota schedules.

Checks a ScheduleResult after the fact, either straight from the scheduler
or re-imported from a JSON export.
"""

from collections import defaultdict

from courtrota.models import MatchFormat, ScheduleResult
from courtrota.scheduler import slots_per_round


def validate_schedule(result: ScheduleResult, players: list[str],
                      courts: int,
                      match_format: MatchFormat | str) -> dict:
    """Validate a schedule against the roster and court setup.

    Returns dict with:
    - valid: bool (True if no hard constraint violations)
    - errors: list of hard constraint violations
    - warnings: list of soft fairness issues
    """
    errors = []
    warnings = []

    if not isinstance(match_format, MatchFormat):
        match_format = MatchFormat.from_str(match_format)
    slots = slots_per_round(courts, match_format)
    team_size = match_format.team_size
    roster = set(players)
    total_rounds = len(result.rounds)

    played = {p: 0 for p in players}
    rest_run = {p: 0 for p in players}
    max_rest_run = {p: 0 for p in players}
    previous_rests: tuple[str, ...] = ()
    exception_total = 0

    for idx, rnd in enumerate(result.rounds):
        label = f"Round {rnd.round_number}"
        if rnd.round_number != idx + 1:
            errors.append(f"{label}: expected round number {idx + 1}")
        if rnd.total_rounds != total_rounds:
            errors.append(
                f"{label}: total_rounds is {rnd.total_rounds}, "
                f"schedule has {total_rounds}"
            )

        # Courts
        if len(rnd.courts) != courts:
            errors.append(f"{label}: {len(rnd.courts)} courts (expected {courts})")
        for c_idx, court in enumerate(rnd.courts):
            if court.court_number != c_idx + 1:
                errors.append(
                    f"{label}: court {court.court_number} out of order "
                    f"(expected {c_idx + 1})"
                )
            for team_name, team in (("A", court.team_a), ("B", court.team_b)):
                if len(team) != team_size:
                    errors.append(
                        f"{label} court {court.court_number}: team {team_name} "
                        f"has {len(team)} players (expected {team_size})"
                    )

        # Every player exactly once per round
        appearances = defaultdict(int)
        for p in rnd.playing + rnd.rests:
            appearances[p] += 1
        for p, count in appearances.items():
            if p not in roster:
                errors.append(f"{label}: unknown player {p}")
            elif count > 1:
                errors.append(f"{label}: {p} appears {count} times")
        for p in players:
            if p not in appearances:
                errors.append(f"{label}: {p} neither plays nor rests")

        # Players who rested last round come back first
        playing = set(rnd.playing)
        expected_exceptions = max(0, len(previous_rests) - slots)
        if len(previous_rests) <= slots:
            for p in previous_rests:
                if p not in playing:
                    errors.append(
                        f"{label}: {p} rested last round but sits out again "
                        f"with slots to spare"
                    )
        if rnd.consecutive_rest_exceptions != expected_exceptions:
            errors.append(
                f"{label}: {rnd.consecutive_rest_exceptions} rest exceptions "
                f"recorded (expected {expected_exceptions})"
            )
        exception_total += expected_exceptions

        for p in players:
            if p in playing:
                played[p] += 1
                rest_run[p] = 0
            else:
                rest_run[p] += 1
                max_rest_run[p] = max(max_rest_run[p], rest_run[p])

        previous_rests = rnd.rests

    if result.total_consecutive_rest_exceptions != exception_total:
        errors.append(
            f"Total rest exceptions is {result.total_consecutive_rest_exceptions} "
            f"(expected {exception_total})"
        )

    spread = max(played.values()) - min(played.values()) if played else 0
    if result.max_played_minus_min_played != spread:
        errors.append(
            f"Played spread is {result.max_played_minus_min_played} "
            f"(expected {spread})"
        )

    # Soft fairness checks
    if spread > 1:
        most = sorted(p for p, n in played.items() if n == max(played.values()))
        least = sorted(p for p, n in played.items() if n == min(played.values()))
        warnings.append(
            f"Played spread {spread} exceeds 1: "
            f"most={', '.join(most)}, least={', '.join(least)}"
        )
    for p in players:
        if max_rest_run[p] > 1:
            warnings.append(f"{p} rests {max_rest_run[p]} rounds in a row")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_validation_report(result: dict) -> str:
    """Format validation results as text."""
    lines = []
    lines.append("=" * 60)
    lines.append("SCHEDULE VALIDATION REPORT")
    lines.append("=" * 60)

    if result["valid"]:
        lines.append("\nRESULT: VALID (no hard constraint violations)")
    else:
        lines.append(f"\nRESULT: INVALID ({len(result['errors'])} violations)")

    if result["errors"]:
        lines.append(f"\n--- ERRORS ({len(result['errors'])}) ---")
        for e in result["errors"]:
            lines.append(f"  ERROR: {e}")

    if result["warnings"]:
        lines.append(f"\n--- WARNINGS ({len(result['warnings'])}) ---")
        for w in result["warnings"]:
            lines.append(f"  WARN: {w}")

    return "\n".join(lines)
