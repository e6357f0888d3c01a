"""Tests for selector.py - least-played selection."""

from courtrota.models import PlayerStats
from courtrota.rng import seeded_random
from courtrota.selector import pick_by_least_played


def _stats(**kwargs):
    """Build a stats map from name=(played, last_rest_round) pairs."""
    return {
        name: PlayerStats(played=played, last_rest_round=last)
        for name, (played, last) in kwargs.items()
    }


def _counting(rng):
    calls = []

    def wrapped():
        calls.append(1)
        return rng()

    return wrapped, calls


class TestPickByLeastPlayed:
    def test_zero_count(self):
        rng, calls = _counting(seeded_random(1))
        stats = _stats(A=(0, None), B=(0, None))
        assert pick_by_least_played(["A", "B"], 0, stats, rng, 0) == []
        assert calls == []

    def test_least_played_first(self):
        stats = _stats(A=(0, None), B=(1, None), C=(0, None), D=(2, None))
        picked = pick_by_least_played(["A", "B", "C", "D"], 2, stats,
                                      seeded_random(1), 1)
        assert set(picked) == {"A", "C"}

    def test_buckets_in_order(self):
        stats = _stats(A=(0, None), B=(1, None), C=(0, None), D=(2, None))
        picked = pick_by_least_played(["D", "B", "C", "A"], 3, stats,
                                      seeded_random(1), 1)
        assert set(picked[:2]) == {"A", "C"}
        assert picked[2] == "B"

    def test_recent_rest_plays_first(self):
        # All played once; A rested most recently, C never rested
        stats = _stats(A=(1, 2), B=(1, 0), C=(1, None))
        rng = seeded_random(1)
        assert pick_by_least_played(["C", "B", "A"], 1, stats, rng, 3) == ["A"]
        assert pick_by_least_played(["C", "B", "A"], 3, stats, rng, 3) == ["A", "B", "C"]

    def test_never_rested_last_within_bucket(self):
        stats = _stats(A=(2, None), B=(2, None), C=(2, 0))
        picked = pick_by_least_played(["A", "B", "C"], 1, stats,
                                      seeded_random(5), 4)
        assert picked == ["C"]

    def test_played_beats_rest_gap(self):
        # B rested recently but has played more than A
        stats = _stats(A=(0, None), B=(1, 1))
        picked = pick_by_least_played(["B", "A"], 1, stats, seeded_random(1), 2)
        assert picked == ["A"]

    def test_ties_are_shuffled(self):
        rng, calls = _counting(seeded_random(1))
        stats = _stats(A=(0, None), B=(0, None), C=(0, None), D=(0, None))
        picked = pick_by_least_played(["A", "B", "C", "D"], 2, stats, rng, 0)
        assert len(picked) == 2
        assert len(set(picked)) == 2
        assert len(calls) == 3  # one shuffle of four tied players

    def test_later_buckets_draw_nothing(self):
        rng, calls = _counting(seeded_random(1))
        stats = _stats(A=(0, None), B=(1, None), C=(1, None))
        assert pick_by_least_played(["A", "B", "C"], 1, stats, rng, 1) == ["A"]
        assert calls == []

    def test_partial_bucket_shuffles_whole_bucket(self):
        rng, calls = _counting(seeded_random(1))
        stats = _stats(A=(0, None), B=(1, None), C=(1, None), D=(1, None))
        picked = pick_by_least_played(["A", "B", "C", "D"], 2, stats, rng, 1)
        assert picked[0] == "A"
        assert picked[1] in {"B", "C", "D"}
        assert len(calls) == 2

    def test_not_enough_candidates(self):
        stats = _stats(A=(0, None), B=(3, 1))
        picked = pick_by_least_played(["A", "B"], 5, stats, seeded_random(1), 2)
        assert picked == ["A", "B"]

    def test_deterministic(self):
        names = [f"P{i}" for i in range(10)]
        stats = {p: PlayerStats(played=i % 3, last_rest_round=(i % 4) or None)
                 for i, p in enumerate(names)}
        a = pick_by_least_played(names, 6, stats, seeded_random(77), 5)
        b = pick_by_least_played(names, 6, stats, seeded_random(77), 5)
        assert a == b

    def test_does_not_mutate_candidates(self):
        names = ["A", "B", "C", "D"]
        stats = _stats(A=(0, None), B=(0, None), C=(0, None), D=(0, None))
        pick_by_least_played(names, 3, stats, seeded_random(1), 0)
        assert names == ["A", "B", "C", "D"]
