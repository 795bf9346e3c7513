# tests/codec/test_parse_end.py

import pytest

from ants_api.codec import parse_end
from ants_api.errors import ProtocolError
from ants_api.position import pos
from tests.test_utils import make_lines


def test_parse_end_success() -> None:
    lines = make_lines(
        """
        players 2
        score 1 0
        f 6 5
        d 7 9 1
        a 10 8 0
        go
        """
    )
    world, score = parse_end(iter(lines))
    assert list(score.per_player) == [1, 0]
    assert list(world.foods) == [pos(6, 5)]
    assert list(world.dead_ants_for(1)) == [pos(7, 9)]
    assert list(world.live_ants_for(0)) == [pos(10, 8)]


def test_large_scores() -> None:
    _, score = parse_end(iter(["players 1", f"score {2**64 - 1}", "go"]))
    assert list(score.per_player) == [2**64 - 1]


@pytest.mark.parametrize(
    "players, scores",
    [(2, []), (2, [1]), (2, [1, 2, 3]), (1, [0, 0]), (0, [5]), (3, [1, 1])],
)
def test_player_score_mismatch_is_fatal(players: int, scores: list) -> None:
    score_line = " ".join(["score", *map(str, scores)])
    with pytest.raises(ProtocolError, match="player scores"):
        parse_end(iter([f"players {players}", score_line, "go"]))


@pytest.mark.parametrize(
    "lines",
    [
        ["player 2", "score 1 0", "go"],
        ["players two", "score 1 0", "go"],
        ["players", "score 1 0", "go"],
        ["score 1 0", "players 2", "go"],
        ["players 2", "scores 1 0", "go"],
        ["players 2", "score 1 x", "go"],
        ["players 2", "score 1 -1", "go"],
        ["players 2", "score 1 0", "q 1 1", "go"],
    ],
)
def test_malformed_end_block_is_fatal(lines: list) -> None:
    with pytest.raises(ProtocolError):
        parse_end(iter(lines))


def test_truncated_end_block_is_fatal() -> None:
    with pytest.raises(ProtocolError, match="end of input"):
        parse_end(iter(["players 2"]))
