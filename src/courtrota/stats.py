"""Statistics and balance reporting for courtrota schedules."""

from collections import defaultdict

from courtrota.models import ScheduleResult


def compute_stats(result: ScheduleResult, players: list[str]) -> dict:
    """Compute per-player statistics for a schedule.

    Returns dict with all stats needed for the balance report.
    """
    played = {p: 0 for p in players}
    rests = {p: 0 for p in players}
    max_rest_run = {p: 0 for p in players}
    rest_run = {p: 0 for p in players}

    # Partner matrix (doubles only) and opponent matrix
    partner_counts = defaultdict(lambda: defaultdict(int))
    opponent_counts = defaultdict(lambda: defaultdict(int))

    # Games per player on each court number
    court_counts = defaultdict(lambda: defaultdict(int))

    for rnd in result.rounds:
        on_court = set()
        for court in rnd.courts:
            for team, other in ((court.team_a, court.team_b),
                                (court.team_b, court.team_a)):
                for p in team:
                    on_court.add(p)
                    court_counts[p][court.court_number] += 1
                    for mate in team:
                        if mate != p:
                            partner_counts[p][mate] += 1
                    for opp in other:
                        opponent_counts[p][opp] += 1

        for p in players:
            if p in on_court:
                played[p] += 1
                rest_run[p] = 0
            else:
                rests[p] += 1
                rest_run[p] += 1
                max_rest_run[p] = max(max_rest_run[p], rest_run[p])

    counts = list(played.values())
    return {
        "players": list(players),
        "rounds": len(result.rounds),
        "played": played,
        "rests": rests,
        "max_consecutive_rest": max_rest_run,
        "partner_counts": {k: dict(v) for k, v in partner_counts.items()},
        "opponent_counts": {k: dict(v) for k, v in opponent_counts.items()},
        "court_counts": {k: dict(v) for k, v in court_counts.items()},
        "spread": max(counts) - min(counts) if counts else 0,
        "rest_exceptions": result.total_consecutive_rest_exceptions,
    }


def format_stats_report(stats: dict) -> str:
    """Format statistics into a human-readable report."""
    lines = []
    lines.append("=" * 60)
    lines.append("SCHEDULE STATISTICS")
    lines.append("=" * 60)

    players = stats["players"]
    width = max([8] + [len(p) + 1 for p in players])

    lines.append("\n--- PLAYING TIME ---")
    lines.append(f"{'Player':<{width}} {'Play':>5} {'Rest':>5} {'Run':>5}")
    lines.append("-" * (width + 18))
    most = max(stats["played"].values(), default=0)
    least = min(stats["played"].values(), default=0)
    for p in players:
        n = stats["played"][p]
        flag = ""
        if most - least > 1 and n in (most, least):
            flag = " ***"
        lines.append(
            f"{p:<{width}} {n:>5} {stats['rests'][p]:>5} "
            f"{stats['max_consecutive_rest'][p]:>5}{flag}"
        )
    lines.append(f"\nSpread (max played - min played): {stats['spread']}")
    lines.append(f"Rest exceptions: {stats['rest_exceptions']}")

    # Opponent matrix
    col = max([5] + [len(p) for p in players])
    lines.append("\n--- OPPONENT MATRIX ---")
    header = f"{'':>{width}}"
    for p in players:
        header += f" {p:>{col}}"
    lines.append(header)
    lines.append("-" * (width + (col + 1) * len(players)))
    for p1 in players:
        row = f"{p1:>{width}}"
        for p2 in players:
            if p1 == p2:
                row += f" {'-':>{col}}"
            else:
                c = stats["opponent_counts"].get(p1, {}).get(p2, 0)
                row += f" {c:>{col}}"
        lines.append(row)

    # Court usage
    courts = sorted({n for used in stats["court_counts"].values() for n in used})
    if courts:
        lines.append("\n--- COURT USAGE ---")
        header = f"{'Player':<{width}}"
        for n in courts:
            header += f" {'C' + str(n):>4}"
        lines.append(header)
        for p in players:
            used = stats["court_counts"].get(p, {})
            row = f"{p:<{width}}"
            for n in courts:
                row += f" {used.get(n, 0):>4}"
            lines.append(row)

    if stats["partner_counts"]:
        lines.append("\n--- PARTNERS ---")
        for p in players:
            mates = stats["partner_counts"].get(p, {})
            if not mates:
                continue
            desc = ", ".join(f"{m} x{n}" for m, n in sorted(mates.items()))
            lines.append(f"{p:<{width}} {desc}")

    return "\n".join(lines)
