"""A sorted-set leaderboard: members ranked by unique integer scores."""

from __future__ import annotations

from typing import Iterable, Optional

from archlab.skiplist import SkipList, SkipListNode, _RandomSource

Entry = tuple[str, int]


def _entries(nodes: Iterable[SkipListNode]) -> list[Entry]:
    return [(node.member, node.score) for node in nodes]


class Leaderboard:
    """Members kept in ascending score order; rank 1 is the lowest score.

    A mapping gives each member's score, a skip list keeps scores ordered.
    Scores are unique across members.
    """

    def __init__(self, rng: Optional[_RandomSource] = None) -> None:
        self._ranking = SkipList(rng)
        self._scores: dict[str, int] = {}

    def zadd(self, member: str, score: int) -> int:
        """Add `member` or change its score; return how many changed (0 or 1)."""
        old_score = self._scores.get(member)
        if old_score is None:
            if not self._ranking.insert(member, score):
                return 0
            self._scores[member] = score
            return 1

        if old_score == score:
            return 0

        self._ranking.remove(old_score)
        if not self._ranking.insert(member, score):
            self._ranking.insert(member, old_score)
            return 0
        self._scores[member] = score
        return 1

    def zrem(self, member: str) -> int:
        """Remove `member`; return how many were removed (0 or 1)."""
        score = self._scores.pop(member, None)
        if score is None:
            return 0
        self._ranking.remove(score)
        return 1

    def zcard(self) -> int:
        """Number of members."""
        return len(self._ranking)

    def zscore(self, member: str) -> Optional[int]:
        """Score of `member`, or None if absent."""
        return self._scores.get(member)

    def zrank(self, member: str, reverse: bool = False) -> Optional[int]:
        """1-based rank of `member`, ascending unless `reverse`; None if absent."""
        score = self._scores.get(member)
        if score is None:
            return None
        rank = self._ranking.rank_of(score)
        if rank is None:
            return None
        if reverse:
            rank = len(self._ranking) - rank + 1
        return rank

    def zrevrank(self, member: str) -> Optional[int]:
        """1-based rank of `member` with the highest score first."""
        return self.zrank(member, reverse=True)

    def _absolute(self, rank: int) -> int:
        return len(self._ranking) + rank + 1 if rank < 0 else rank

    def zrange(self, start: int, end: int) -> list[Entry]:
        """Members with ranks in [start, end], ascending; negatives count from the end."""
        start, end = self._absolute(start), self._absolute(end)
        return _entries(self._ranking.range_by_rank(start, end))

    def zrevrange(self, start: int, end: int) -> list[Entry]:
        """Members with reverse ranks in [start, end], highest score first."""
        length = len(self._ranking)
        start, end = self._absolute(start), self._absolute(end)
        nodes = self._ranking.range_by_rank(length - end + 1, length - start + 1)
        return _entries(reversed(nodes))

    def zrangebyscore(self, min_score: int, max_score: int) -> list[Entry]:
        """Members with scores in [min_score, max_score], ascending."""
        if min_score > max_score:
            return []
        return _entries(self._ranking.range_by_score(min_score, max_score))


def format_int(value: int) -> str:
    """Reply line for an integer result."""
    return f"(integer) {value}\n"


def format_nil() -> str:
    """Reply line for a missing result."""
    return "(nil)\n"


def format_array(entries: Iterable[Entry]) -> str:
    """Reply lines for a list of (member, score) pairs, in the given order."""
    items = list(entries)
    if not items:
        return "(empty array)\n"
    lines = [f"(array) {len(items)} item(s)\n"]
    lines.extend(
        f"  #{index}: {member} ({score})\n"
        for index, (member, score) in enumerate(items, 1)
    )
    return "".join(lines)