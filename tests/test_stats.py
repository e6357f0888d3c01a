"""Tests for stats.py - per-player statistics."""

from courtrota.models import CourtAssignment, RoundResult, ScheduleResult
from courtrota.scheduler import generate_schedule
from courtrota.stats import compute_stats, format_stats_report


def _doubles_one_round():
    return ScheduleResult(
        rounds=(RoundResult(1, 1, (
            CourtAssignment(1, ("A", "B"), ("C", "D")),
        ), ("E",)),),
        seed=1, max_played_minus_min_played=1,
        total_consecutive_rest_exceptions=0,
    )


class TestComputeStats:
    def test_counts(self):
        stats = compute_stats(_doubles_one_round(), ["A", "B", "C", "D", "E"])
        assert stats["played"] == {"A": 1, "B": 1, "C": 1, "D": 1, "E": 0}
        assert stats["rests"]["E"] == 1
        assert stats["max_consecutive_rest"]["E"] == 1
        assert stats["spread"] == 1
        assert stats["rounds"] == 1

    def test_partners_and_opponents(self):
        stats = compute_stats(_doubles_one_round(), ["A", "B", "C", "D", "E"])
        assert stats["partner_counts"]["A"] == {"B": 1}
        assert stats["partner_counts"]["D"] == {"C": 1}
        assert stats["opponent_counts"]["A"] == {"C": 1, "D": 1}
        assert "E" not in stats["opponent_counts"]
        assert stats["court_counts"]["B"] == {1: 1}

    def test_singles_has_no_partners(self):
        players = [f"P{i}" for i in range(6)]
        result = generate_schedule(players, 2, 4, 3, "singles")
        stats = compute_stats(result, players)
        assert stats["partner_counts"] == {}

    def test_matches_scheduler_summary(self):
        players = [f"P{i}" for i in range(13)]
        result = generate_schedule(players, 3, 9, 17, "doubles")
        stats = compute_stats(result, players)
        assert stats["spread"] == result.max_played_minus_min_played
        assert stats["rest_exceptions"] == result.total_consecutive_rest_exceptions
        for p in players:
            assert stats["played"][p] + stats["rests"][p] == 9


class TestFormatStatsReport:
    def test_sections(self):
        stats = compute_stats(_doubles_one_round(), ["A", "B", "C", "D", "E"])
        text = format_stats_report(stats)
        assert "PLAYING TIME" in text
        assert "OPPONENT MATRIX" in text
        assert "PARTNERS" in text
        assert "Spread (max played - min played): 1" in text
        assert "A        B x1" in text
        assert "COURT USAGE" in text
        assert "E" + " " * 11 + "0" in text

    def test_opponent_matrix_aligned_with_long_names(self):
        players = ["Avery", "Blake", "Casey", "Devon", "Emery", "Finley",
                   "Gray", "Harper", "Indy", "Jules"]
        result = generate_schedule(players, 2, 5, 42, "doubles")
        lines = format_stats_report(compute_stats(result, players)).splitlines()
        start = lines.index("--- OPPONENT MATRIX ---") + 1
        block = lines[start:start + 2 + len(players)]
        assert {len(line) for line in block} == {len(block[0])}
        assert block[0].split() == players

    def test_court_usage_totals(self):
        players = [f"P{i}" for i in range(10)]
        result = generate_schedule(players, 2, 6, 5, "doubles")
        stats = compute_stats(result, players)
        for p in players:
            assert sum(stats["court_counts"].get(p, {}).values()) == stats["played"][p]
        text = format_stats_report(stats)
        assert "C1" in text and "C2" in text
