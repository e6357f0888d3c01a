"""Round scheduling engine for courtrota.

Each round:
1. Players who rested last round must play (if they all fit).
2. Remaining slots go to the least-played players (selector.py).
3. The chosen players are shuffled and dealt onto courts in order.
4. Everyone else rests; per-player stats are updated.

The whole run is a pure function of (players, courts, rounds, seed, format):
the same arguments always give the same ScheduleResult.
"""

from courtrota.models import (
    CourtAssignment, MatchFormat, PlayerStats, RoundResult, ScheduleResult,
    ValidationError,
)
from courtrota.rng import seeded_random, shuffle
from courtrota.selector import pick_by_least_played

MIN_PLAYERS = 4
MAX_PLAYERS = 16
MIN_COURTS = 1
MAX_COURTS = 4


def _as_match_format(match_format: MatchFormat | str) -> MatchFormat:
    if isinstance(match_format, MatchFormat):
        return match_format
    try:
        return MatchFormat.from_str(str(match_format))
    except ValueError:
        raise ValidationError(
            f"Match format must be singles or doubles, got {match_format!r}."
        ) from None


def slots_per_round(courts: int, match_format: MatchFormat | str) -> int:
    """Number of players on court in one round."""
    return courts * _as_match_format(match_format).players_per_court


def validate_inputs(players: list[str], courts: int, rounds: int,
                    match_format: MatchFormat | str) -> int:
    """Check scheduling input, raising ValidationError on the first problem.

    Returns the number of slots per round.
    """
    slots = slots_per_round(courts, match_format)
    if len(players) < MIN_PLAYERS or len(players) > MAX_PLAYERS:
        raise ValidationError(
            f"Players must be between {MIN_PLAYERS} and {MAX_PLAYERS}."
        )
    if courts < MIN_COURTS or courts > MAX_COURTS:
        raise ValidationError(
            f"Courts must be between {MIN_COURTS} and {MAX_COURTS}."
        )
    if rounds < 1:
        raise ValidationError("Rounds must be at least 1.")
    if slots > len(players):
        raise ValidationError(f"Need at least {slots} players.")
    if len(set(players)) != len(players):
        raise ValidationError("Player names must be unique.")
    return slots


def assign_courts(players: list[str], courts: int,
                  match_format: MatchFormat) -> list[CourtAssignment]:
    """Deal players onto courts in order: first team A, then team B."""
    per_court = match_format.players_per_court
    team_size = match_format.team_size
    assignments = []
    for c in range(courts):
        group = players[c * per_court:(c + 1) * per_court]
        assignments.append(CourtAssignment(
            court_number=c + 1,
            team_a=tuple(group[:team_size]),
            team_b=tuple(group[team_size:]),
        ))
    return assignments


def generate_schedule(players: list[str], courts: int, rounds: int,
                      seed: int,
                      match_format: MatchFormat | str) -> ScheduleResult:
    """Generate `rounds` rounds of court assignments for `players`.

    Raises ValidationError before computing anything if the input is
    invalid (player count, court count, round count, too few players for
    the courts, duplicate names).
    """
    match_format = _as_match_format(match_format)
    players = list(players)
    slots = validate_inputs(players, courts, rounds, match_format)

    rng = seeded_random(seed)
    stats = {p: PlayerStats() for p in players}

    previous_rests: list[str] = []
    total_exceptions = 0
    round_results = []

    for i in range(rounds):
        must_play = previous_rests
        if len(must_play) >= slots:
            # More players owed a game than there are slots
            selected = pick_by_least_played(must_play, slots, stats, rng, i)
        else:
            chosen = set(must_play)
            others = [p for p in players if p not in chosen]
            selected = must_play + pick_by_least_played(
                others, slots - len(must_play), stats, rng, i
            )

        court_list = assign_courts(shuffle(selected, rng), courts, match_format)

        on_court = set(selected)
        rests = [p for p in players if p not in on_court]
        exceptions = max(0, len(must_play) - slots)
        total_exceptions += exceptions

        for player in players:
            if player in on_court:
                stats[player].record_play()
            else:
                stats[player].record_rest(i)

        round_results.append(RoundResult(
            round_number=i + 1,
            total_rounds=rounds,
            courts=tuple(court_list),
            rests=tuple(rests),
            consecutive_rest_exceptions=exceptions,
        ))
        previous_rests = rests

    played_counts = [s.played for s in stats.values()]
    return ScheduleResult(
        rounds=tuple(round_results),
        seed=seed,
        max_played_minus_min_played=max(played_counts) - min(played_counts),
        total_consecutive_rest_exceptions=total_exceptions,
    )
