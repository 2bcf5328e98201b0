import random

import pytest

from archlab.leaderboard import Leaderboard, format_array, format_int, format_nil

SCORES = {"player1": 100, "player2": 200, "player3": 300, "player4": 400, "player5": 500}


@pytest.fixture
def board():
    lb = Leaderboard(random.Random(7))
    for member, score in SCORES.items():
        lb.zadd(member, score)
    return lb


def _ascending():
    return sorted(SCORES.items(), key=lambda item: item[1])


def test_zadd_new_member_is_counted():
    lb = Leaderboard(random.Random(1))
    assert lb.zadd("alice", 10) == 1
    assert lb.zcard() == 1
    assert lb.zscore("alice") == 10


def test_zadd_same_score_changes_nothing(board):
    assert board.zadd("player3", 300) == 0
    assert board.zcard() == len(SCORES)


def test_zadd_updates_score(board):
    assert board.zadd("player1", 600) == 1
    assert board.zscore("player1") == 600
    assert board.zcard() == len(SCORES)
    assert board.zrange(-1, -1) == [("player1", 600)]


def test_zadd_taken_score_is_refused(board):
    assert board.zadd("player6", 300) == 0
    assert board.zscore("player6") is None
    assert board.zcard() == len(SCORES)


def test_update_to_taken_score_keeps_old(board):
    assert board.zadd("player1", 500) == 0
    assert board.zscore("player1") == 100
    assert board.zrange(1, -1) == _ascending()


def test_sentinel_scores_are_refused():
    lb = Leaderboard(random.Random(2))
    assert lb.zadd("low", -(2**31)) == 0
    assert lb.zadd("high", 2**31 - 1) == 0
    assert lb.zcard() == 0


def test_zrem(board):
    assert board.zrem("player3") == 1
    assert board.zrem("player3") == 0
    assert board.zscore("player3") is None
    assert board.zcard() == len(SCORES) - 1
    assert ("player3", 300) not in board.zrange(1, -1)


def test_score_freed_after_removal(board):
    board.zrem("player3")
    assert board.zadd("player7", 300) == 1
    assert board.zscore("player7") == 300


def test_missing_member_queries(board):
    assert board.zscore("nobody") is None
    assert board.zrank("nobody") is None
    assert board.zrevrank("nobody") is None


def test_ranks_follow_score_order(board):
    for rank, (member, _) in enumerate(_ascending(), 1):
        assert board.zrank(member) == rank
        assert board.zrank(member, True) + rank == board.zcard() + 1
        assert board.zrevrank(member) == board.zrank(member, reverse=True)


def test_zrange_whole_and_negative(board):
    full = board.zrange(1, -1)
    assert full == _ascending()
    assert board.zrange(-2, -1) == full[-2:]
    assert board.zrange(2, 4) == full[1:4]


@pytest.mark.parametrize("start,end", [(3, 2), (0, 2), (1, 6), (-15, -13)])
def test_zrange_invalid(board, start, end):
    assert board.zrange(start, end) == []


def test_zrevrange(board):
    descending = list(reversed(_ascending()))
    assert board.zrevrange(1, -1) == descending
    assert board.zrevrange(1, 2) == descending[:2]
    assert board.zrevrange(-3, -1) == descending[-3:]


@pytest.mark.parametrize("start,end", [(3, 2), (0, 1), (1, 6)])
def test_zrevrange_invalid(board, start, end):
    assert board.zrevrange(start, end) == []


def test_zrangebyscore(board):
    assert board.zrangebyscore(200, 400) == _ascending()[1:4]
    assert board.zrangebyscore(150, 250) == [("player2", 200)]
    assert board.zrangebyscore(400, 200) == []
    assert board.zrangebyscore(600, 900) == []


def test_empty_board():
    lb = Leaderboard(random.Random(3))
    assert lb.zcard() == 0
    assert lb.zrange(1, -1) == []
    assert lb.zrevrange(1, -1) == []


def test_format_int_and_nil():
    assert format_int(5) == "(integer) 5\n"
    assert format_nil() == "(nil)\n"


def test_format_array():
    assert format_array([]) == "(empty array)\n"
    text = format_array([("player1", 100), ("player2", 200)])
    assert text == "(array) 2 item(s)\n  #1: player1 (100)\n  #2: player2 (200)\n"


def test_format_array_of_range(board):
    lines = format_array(board.zrevrange(1, 1)).splitlines()
    assert lines == ["(array) 1 item(s)", "  #1: player5 (500)"]