"""Data models for courtrota court scheduling."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ValidationError(ValueError):
    """Raised when scheduling input breaks one of the roster/court rules."""


class MatchFormat(Enum):
    SINGLES = "singles"
    DOUBLES = "doubles"

    @classmethod
    def from_str(cls, s: str) -> "MatchFormat":
        return cls(s.strip().lower())

    @property
    def players_per_court(self) -> int:
        return 2 if self is MatchFormat.SINGLES else 4

    @property
    def team_size(self) -> int:
        return self.players_per_court // 2


class GameFormat(Enum):
    FOUR_ONLY = "FOUR_ONLY"
    FIRST_TO_4 = "FIRST_TO_4"
    FIRST_TO_6 = "FIRST_TO_6"
    ONE_SET = "ONE_SET"

    @classmethod
    def from_str(cls, s: str) -> "GameFormat":
        return cls[s.strip().upper()]


class AdFormat(Enum):
    NO_AD = "NO_AD"
    ONE_AD = "ONE_AD"
    DEUCE = "DEUCE"

    @classmethod
    def from_str(cls, s: str) -> "AdFormat":
        return cls[s.strip().upper()]


# Minutes per round for each game format / ad scoring combination
RECOMMENDED_MINUTES = {
    GameFormat.FOUR_ONLY: {AdFormat.NO_AD: 20, AdFormat.ONE_AD: 23, AdFormat.DEUCE: 27},
    GameFormat.FIRST_TO_4: {AdFormat.NO_AD: 23, AdFormat.ONE_AD: 27, AdFormat.DEUCE: 32},
    GameFormat.FIRST_TO_6: {AdFormat.NO_AD: 35, AdFormat.ONE_AD: 40, AdFormat.DEUCE: 50},
    GameFormat.ONE_SET: {AdFormat.NO_AD: 50, AdFormat.ONE_AD: 55, AdFormat.DEUCE: 65},
}


@dataclass
class PlayerStats:
    """Running per-player counters for one scheduling run."""
    played: int = 0
    rest: int = 0
    consecutive_rest: int = 0
    max_consecutive_rest: int = 0
    last_rest_round: Optional[int] = None  # None = never rested

    def record_play(self) -> None:
        self.played += 1
        self.consecutive_rest = 0

    def record_rest(self, round_index: int) -> None:
        self.rest += 1
        self.consecutive_rest += 1
        self.last_rest_round = round_index
        if self.consecutive_rest > self.max_consecutive_rest:
            self.max_consecutive_rest = self.consecutive_rest

    def rest_gap(self, round_index: int) -> float:
        """Rounds since the last rest; infinite if the player never rested."""
        if self.last_rest_round is None:
            return float("inf")
        return round_index - self.last_rest_round


@dataclass(frozen=True)
class CourtAssignment:
    """One court in one round: team A against team B."""
    court_number: int
    team_a: tuple[str, ...]
    team_b: tuple[str, ...]

    @property
    def players(self) -> tuple[str, ...]:
        return self.team_a + self.team_b

    def to_dict(self) -> dict:
        return {
            "court_number": self.court_number,
            "team_a": list(self.team_a),
            "team_b": list(self.team_b),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CourtAssignment":
        return cls(
            court_number=int(d["court_number"]),
            team_a=tuple(d["team_a"]),
            team_b=tuple(d["team_b"]),
        )


@dataclass(frozen=True)
class RoundResult:
    """A single round: who plays on which court and who sits out."""
    round_number: int
    total_rounds: int
    courts: tuple[CourtAssignment, ...]
    rests: tuple[str, ...] = ()
    consecutive_rest_exceptions: int = 0

    @property
    def playing(self) -> tuple[str, ...]:
        return tuple(p for c in self.courts for p in c.players)

    def to_dict(self) -> dict:
        return {
            "round_number": self.round_number,
            "total_rounds": self.total_rounds,
            "courts": [c.to_dict() for c in self.courts],
            "rests": list(self.rests),
            "consecutive_rest_exceptions": self.consecutive_rest_exceptions,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "RoundResult":
        return cls(
            round_number=int(d["round_number"]),
            total_rounds=int(d["total_rounds"]),
            courts=tuple(CourtAssignment.from_dict(c) for c in d["courts"]),
            rests=tuple(d.get("rests", [])),
            consecutive_rest_exceptions=int(d.get("consecutive_rest_exceptions", 0)),
        )


@dataclass(frozen=True)
class ScheduleResult:
    """A complete schedule plus its fairness summary."""
    rounds: tuple[RoundResult, ...]
    seed: int
    max_played_minus_min_played: int
    total_consecutive_rest_exceptions: int

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "max_played_minus_min_played": self.max_played_minus_min_played,
            "total_consecutive_rest_exceptions": self.total_consecutive_rest_exceptions,
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ScheduleResult":
        return cls(
            rounds=tuple(RoundResult.from_dict(r) for r in d["rounds"]),
            seed=int(d["seed"]),
            max_played_minus_min_played=int(d["max_played_minus_min_played"]),
            total_consecutive_rest_exceptions=int(d["total_consecutive_rest_exceptions"]),
        )
