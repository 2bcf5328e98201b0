"""An ordered skip list keyed by unique integer scores."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterator, Optional, Protocol

MAX_LEVEL = 16
CAPACITY = 2 << MAX_LEVEL
PROMOTION_PROBABILITY = 0.5

_HEAD_SCORE = -(2**31)
_END_SCORE = 2**31 - 1


class _RandomSource(Protocol):
    def random(self) -> float: ...


def random_level(rng: _RandomSource) -> int:
    """Toss coins to pick a node level in [1, MAX_LEVEL]."""
    level = 1
    while rng.random() < PROMOTION_PROBABILITY and level < MAX_LEVEL:
        level += 1
    return level


@dataclass(eq=False)
class SkipListNode:
    """A member with its score and one forward link per level."""

    member: str
    score: int
    forward: list = field(default_factory=list, repr=False)

    @property
    def level(self) -> int:
        return len(self.forward)

    @property
    def is_head(self) -> bool:
        return self.score == _HEAD_SCORE

    @property
    def is_end(self) -> bool:
        return self.score == _END_SCORE


class SkipList:
    """Skip list ordered by ascending score; scores are unique."""

    def __init__(self, rng: Optional[_RandomSource] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._end = SkipListNode("", _END_SCORE, [None] * MAX_LEVEL)
        self._header = SkipListNode("", _HEAD_SCORE, [self._end] * MAX_LEVEL)
        self.level = 1
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[SkipListNode]:
        node = self._header.forward[0]
        while not node.is_end:
            yield node
            node = node.forward[0]

    @staticmethod
    def _storable(score: int) -> bool:
        return _HEAD_SCORE < score < _END_SCORE

    def _predecessors(self, score: int) -> list[SkipListNode]:
        """Last node before `score` on every level, bottom level first."""
        update: list[SkipListNode] = [self._header] * MAX_LEVEL
        node = self._header
        for i in reversed(range(MAX_LEVEL)):
            while not node.forward[i].is_end and node.forward[i].score < score:
                node = node.forward[i]
            update[i] = node
        return update

    def insert(self, member: str, score: int) -> bool:
        """Insert with a random level; False if full or the score exists."""
        if self._length >= CAPACITY:
            return False
        return self.insert_at_level(member, score, random_level(self._rng))

    def insert_at_level(self, member: str, score: int, level: int) -> bool:
        """Insert with a fixed level; False if the score cannot be stored."""
        if not 1 <= level <= MAX_LEVEL:
            raise ValueError(f"level must be within [1, {MAX_LEVEL}], got {level}")
        if not self._storable(score):
            return False
        update = self._predecessors(score)
        if update[0].forward[0].score == score:
            return False
        node = SkipListNode(member, score, [None] * level)
        for i in range(level):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self.level = max(self.level, level)
        self._length += 1
        return True

    def remove(self, score: int) -> bool:
        """Remove the node with `score`; False if there is none."""
        if not self._storable(score):
            return False
        update = self._predecessors(score)
        target = update[0].forward[0]
        if target.score != score:
            return False
        for i in range(target.level):
            update[i].forward[i] = target.forward[i]
        while self.level > 1 and self._header.forward[self.level - 1].is_end:
            self.level -= 1
        self._length -= 1
        return True

    def get_by_score(self, score: int) -> Optional[SkipListNode]:
        if not self._storable(score):
            return None
        node = self._predecessors(score)[0].forward[0]
        return node if node.score == score else None

    def get_by_rank(self, rank: int) -> Optional[SkipListNode]:
        """Node at 1-based `rank` in ascending score order, or None."""
        if not 1 <= rank <= self._length:
            return None
        return next(islice(self, rank - 1, None))

    def rank_of(self, score: int) -> Optional[int]:
        """1-based rank of the node with `score`, or None if absent."""
        for rank, node in enumerate(self, 1):
            if node.score > score:
                return None
            if node.score == score:
                return rank
        return None

    def range_by_rank(self, start: int, end: int) -> list[SkipListNode]:
        """Nodes with ranks in [start, end]; empty for an invalid range."""
        if start < 1 or end > self._length or start > end:
            return []
        return list(islice(self, start - 1, end))

    def range_by_score(self, min_score: int, max_score: int) -> list[SkipListNode]:
        """Nodes with scores in [min_score, max_score], ascending."""
        if min_score > max_score:
            return []
        node = self._predecessors(min_score)[0].forward[0]
        found = []
        while not node.is_end and node.score <= max_score:
            found.append(node)
            node = node.forward[0]
        return found

    def render(self) -> str:
        """Text picture of every active level, top level first."""
        parts = [f"\nSkip List (level {self.level}):\n"]
        for i in range(self.level, 0, -1):
            line = "Level %d: header" % i
            node = self._header.forward[i - 1]
            while node is not None and not node.is_end:
                line += f" --> ({node.member},{node.score})"
                node = node.forward[i - 1]
            parts.append(line + "\n")
        return "".join(parts)