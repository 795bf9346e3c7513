# tests/utils/test_tokens.py

import pytest
from typing import Optional

from ants_api.utils.tokens import parse_integer


@pytest.mark.parametrize(
    "token, low, high, expected",
    [
        ("0", 0, 10, 0),
        ("10", 0, 10, 10),
        ("11", 0, 10, None),
        ("-1", 0, 10, None),
        ("-1", -5, 5, -1),
        ("+3", -5, 5, 3),
        ("+3", 0, 5, None),
        ("1_0", 0, 100, None),
        ("٣", 0, 10, None),  # non-ASCII digit
        ("", 0, 10, None),
        ("0x1", 0, 10, None),
    ],
)
def test_parse_integer(token: str, low: int, high: int, expected: Optional[int]) -> None:
    assert parse_integer(token, low, high) == expected
