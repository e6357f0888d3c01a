"""Least-played player selection for filling court slots."""

from itertools import groupby
from typing import Callable

from courtrota.models import PlayerStats
from courtrota.rng import shuffle


def pick_by_least_played(candidates: list[str], count: int,
                         stats: dict[str, PlayerStats],
                         rng: Callable[[], float],
                         round_index: int) -> list[str]:
    """Pick `count` players from `candidates`, fewest games played first.

    Candidates are bucketed by games played and buckets are taken in
    ascending order. Inside a bucket, players who rested more recently
    (smaller rest gap) go first so rests stay spread out; players who have
    never rested go last. Players with the same gap are shuffled with `rng`,
    which is the only randomness in the selection.

    Returns fewer than `count` players only if there are not enough
    candidates.
    """
    if count == 0:
        return []

    buckets: dict[int, list[str]] = {}
    for player in candidates:
        buckets.setdefault(stats[player].played, []).append(player)

    def gap(p: str) -> float:
        return stats[p].rest_gap(round_index)

    selected: list[str] = []
    for played in sorted(buckets):
        if len(selected) == count:
            break

        # Stable sort keeps candidate order inside a tie before shuffling it
        ordered = sorted(buckets[played], key=gap)
        bucket: list[str] = []
        for _, tied in groupby(ordered, key=gap):
            bucket.extend(shuffle(list(tied), rng))

        remaining = count - len(selected)
        selected.extend(bucket[:remaining])

    return selected
