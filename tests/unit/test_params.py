# tests/unit/test_params.py

import logging

import pytest

from ants_api.errors import ParameterError
from ants_api.params import PARAMETER_KEYS, GameParameters
from ants_api.position import pos


def test_defaults_are_zero() -> None:
    params = GameParameters()
    for field in PARAMETER_KEYS.values():
        assert getattr(params, field) == 0


def test_put_success() -> None:
    assert GameParameters().put("rows", "33").rows == 33


def test_put_returns_new_instance() -> None:
    params = GameParameters()
    updated = params.put("loadtime", "3000")
    assert updated.loadtime_ms == 3000
    assert params.loadtime_ms == 0


@pytest.mark.parametrize(
    "key, value, field, expected",
    [
        ("loadtime", "3000", "loadtime_ms", 3000),
        ("turntime", "1000", "turntime_ms", 1000),
        ("cols", "72", "cols", 72),
        ("turns", "500", "turns", 500),
        ("viewradius2", "77", "viewradius2", 77),
        ("attackradius2", "5", "attackradius2", 5),
        ("spawnradius2", "1", "spawnradius2", 1),
        ("player_seed", "-42", "player_seed", -42),
        ("player_seed", "9223372036854775807", "player_seed", 2**63 - 1),
    ],
)
def test_put_every_key(key: str, value: str, field: str, expected: int) -> None:
    assert getattr(GameParameters().put(key, value), field) == expected


def test_put_ignore_bad_key(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="ants_api.params"):
        params = GameParameters().put("bad key", "33")
    assert params == GameParameters()
    assert "Unknown game parameter key" in caplog.text


@pytest.mark.parametrize("value", ["ee", "1.5", "", "1_000", "9223372036854775808"])
def test_put_ignore_bad_value(value: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="ants_api.params"):
        assert GameParameters().put("rows", value).rows == 0
    assert "not an integer" in caplog.text


def test_put_strict_raises() -> None:
    with pytest.raises(ParameterError):
        GameParameters().put("bad key", "33", strict=True)
    with pytest.raises(ParameterError):
        GameParameters().put("rows", "ee", strict=True)


def test_bounds() -> None:
    assert GameParameters(rows=20, cols=30).bounds == pos(20, 30)
