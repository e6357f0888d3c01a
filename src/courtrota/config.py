"""Config loading and validation for courtrota sessions."""

import time
from pathlib import Path

import yaml

from courtrota.models import (
    RECOMMENDED_MINUTES, AdFormat, GameFormat, MatchFormat, ValidationError,
)
from courtrota.scheduler import MAX_COURTS, MIN_COURTS


def recommended_round_minutes(game_format: GameFormat | str,
                              ad_format: AdFormat | str) -> int:
    """Minutes to allow per round for a game format and ad scoring."""
    if not isinstance(game_format, GameFormat):
        game_format = GameFormat.from_str(game_format)
    if not isinstance(ad_format, AdFormat):
        ad_format = AdFormat.from_str(ad_format)
    return RECOMMENDED_MINUTES[game_format][ad_format]


def compute_rounds(total_minutes: int, round_minutes: int) -> int:
    """Whole rounds that fit in the session: floor(total / per round)."""
    if total_minutes <= 0:
        raise ValidationError("Total minutes must be positive.")
    if round_minutes <= 0:
        raise ValidationError("Round minutes must be positive.")
    rounds = total_minutes // round_minutes
    if rounds < 1:
        raise ValidationError(
            "rounds = floor(totalMinutes / roundMinutes) must be at least 1."
        )
    return rounds


def _parse_int(value, message: str) -> int:
    """Accept ints and integer strings; bools and floats are rejected."""
    if isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        raise ValidationError(message) from None


def _parse_enum(enum_cls, value, label: str):
    try:
        return enum_cls.from_str(str(value))
    except (KeyError, ValueError):
        choices = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{label} must be one of: {choices}.") from None


def parse_session(raw: dict) -> dict:
    """Validate the `session:` block and fill in defaults."""
    courts_msg = f"Courts must be between {MIN_COURTS} and {MAX_COURTS}."
    courts = _parse_int(raw.get("courts", 1), courts_msg)
    if courts < MIN_COURTS or courts > MAX_COURTS:
        raise ValidationError(courts_msg)

    match_format = _parse_enum(MatchFormat, raw.get("match_format", "doubles"),
                               "Match format")
    game_format = _parse_enum(GameFormat, raw.get("game_format", "FOUR_ONLY"),
                              "Game format")
    ad_format = _parse_enum(AdFormat, raw.get("ad_format", "NO_AD"), "Ad format")

    total_minutes = _parse_int(raw.get("total_minutes", 120),
                               "Total minutes must be positive.")
    if "round_minutes" in raw and raw["round_minutes"] is not None:
        round_minutes = _parse_int(raw["round_minutes"],
                                   "Round minutes must be positive.")
    else:
        round_minutes = recommended_round_minutes(game_format, ad_format)

    seed = raw.get("seed")
    if seed is None:
        seed = int(time.time() * 1000)
    else:
        seed = _parse_int(seed, "Seed must be an integer.")

    return {
        "name": str(raw.get("name", "")),
        "courts": courts,
        "match_format": match_format,
        "game_format": game_format,
        "ad_format": ad_format,
        "total_minutes": total_minutes,
        "round_minutes": round_minutes,
        "seed": seed,
    }


def _parse_players(raw) -> list[str]:
    """Roster names in order, stripped. Null or blank entries are rejected."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValidationError("players must be a list of names.")
    players = []
    for i, p in enumerate(raw, 1):
        name = "" if p is None else str(p).strip()
        if not name:
            raise ValidationError(f"Player {i} has a blank name.")
        players.append(name)
    return players


def load_config(path: str | Path) -> dict:
    """Load and validate a session config YAML.

    Returns dict with:
    - session: {name, courts, match_format, game_format, ad_format,
      total_minutes, round_minutes, seed}
    - players: list of player names, in roster order
    - rounds: floor(total_minutes / round_minutes)

    Roster rules (count, uniqueness, enough players for the courts) are
    checked by the scheduler, not here.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValidationError(f"{path} must be a mapping with session and players.")

    raw_session = raw.get("session") or {}
    if not isinstance(raw_session, dict):
        raise ValidationError("session must be a mapping of settings.")

    session = parse_session(raw_session)
    players = _parse_players(raw.get("players"))
    rounds = compute_rounds(session["total_minutes"], session["round_minutes"])

    return {
        "session": session,
        "players": players,
        "rounds": rounds,
    }
