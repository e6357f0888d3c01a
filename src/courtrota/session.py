"""Session state: the roster, seed and last generated schedule.

The scheduler itself is a pure function; a Session holds everything a
caller keeps between runs (roster edits, the current seed, which round is
on display) and re-runs the scheduler from scratch on every generate.
"""

import time
from typing import Optional

from courtrota.models import MatchFormat, RoundResult, ScheduleResult, ValidationError
from courtrota.scheduler import MAX_PLAYERS, MIN_PLAYERS, generate_schedule

DEFAULT_PLAYERS = ["P1", "P2", "P3", "P4", "P5"]


class Session:
    def __init__(self, players: Optional[list[str]] = None,
                 seed: Optional[int] = None):
        self.players = list(players) if players is not None else list(DEFAULT_PLAYERS)
        self.seed = seed if seed is not None else int(time.time() * 1000)
        self.last_result: Optional[ScheduleResult] = None
        self.current_round_index = 0

    # --- Roster ---

    def next_player_name(self) -> str:
        """First free default name P{n}, starting after the roster size."""
        n = len(self.players) + 1
        while f"P{n}" in self.players:
            n += 1
        return f"P{n}"

    def add_player(self, name: str = "") -> str:
        name = name.strip()
        if not name:
            name = self.next_player_name()
        if name in self.players:
            raise ValidationError("Player name must be unique.")
        if len(self.players) >= MAX_PLAYERS:
            raise ValidationError(f"Players cannot exceed {MAX_PLAYERS}.")
        self.players.append(name)
        return name

    def remove_player(self, name: str) -> None:
        if len(self.players) <= MIN_PLAYERS:
            raise ValidationError(f"Players must be at least {MIN_PLAYERS}.")
        if name not in self.players:
            raise ValidationError(f"Player {name} is not on the roster.")
        self.players = [p for p in self.players if p != name]

    # --- Scheduling ---

    def generate(self, courts: int, rounds: int,
                 match_format: MatchFormat | str) -> ScheduleResult:
        """Schedule the current roster with the current seed.

        On ValidationError the previous result is kept.
        """
        result = generate_schedule(
            list(self.players), courts, rounds, self.seed, match_format
        )
        self.last_result = result
        self.current_round_index = 0
        return result

    def regenerate(self, courts: int, rounds: int,
                   match_format: MatchFormat | str) -> ScheduleResult:
        """Bump the seed by one and generate again."""
        self.seed += 1
        return self.generate(courts, rounds, match_format)

    # --- Round navigation ---

    @property
    def total_rounds(self) -> int:
        return len(self.last_result.rounds) if self.last_result else 0

    @property
    def current_round(self) -> Optional[RoundResult]:
        if not self.last_result:
            return None
        return self.last_result.rounds[self.current_round_index]

    @property
    def upcoming_round(self) -> Optional[RoundResult]:
        """The round after the one on display, if any."""
        if not self.last_result or not self.has_next:
            return None
        return self.last_result.rounds[self.current_round_index + 1]

    @property
    def has_previous(self) -> bool:
        return self.current_round_index > 0

    @property
    def has_next(self) -> bool:
        return self.current_round_index < self.total_rounds - 1

    def _move(self, step: int) -> Optional[RoundResult]:
        if not self.last_result:
            return None
        self.current_round_index = max(
            0, min(self.current_round_index + step, self.total_rounds - 1)
        )
        return self.current_round

    def show_next(self) -> Optional[RoundResult]:
        return self._move(1)

    def show_previous(self) -> Optional[RoundResult]:
        return self._move(-1)
