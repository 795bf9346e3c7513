# tests/codec/test_orders_codec.py

import pytest

from ants_api.codec import parse_orders, serialize_orders
from ants_api.errors import ProtocolError
from ants_api.orders import Direction, Order
from ants_api.position import pos


def test_serialize_orders() -> None:
    orders = [
        Order(pos(1, 2), Direction.NORTH),
        Order(pos(0, 0), Direction.WEST),
        Order(pos(10, 300), Direction.SOUTH),
        Order(pos(4, 4), Direction.EAST),
    ]
    assert serialize_orders(orders) == "o 1 2 N\no 0 0 W\no 10 300 S\no 4 4 E\n"


def test_serialize_keeps_input_order() -> None:
    orders = [Order(pos(9, 9), Direction.EAST), Order(pos(0, 0), Direction.EAST)]
    assert serialize_orders(orders).splitlines() == ["o 9 9 E", "o 0 0 E"]


def test_stay_orders_are_omitted() -> None:
    orders = [
        Order(pos(1, 1), Direction.STAY),
        Order(pos(2, 2), Direction.SOUTH),
        Order(pos(3, 3), Direction.STAY),
    ]
    assert serialize_orders(orders) == "o 2 2 S\n"
    assert serialize_orders([]) == ""


def test_parse_serialized_orders_preserves_pairs() -> None:
    orders = [
        Order(pos(5, 1), Direction.WEST),
        Order(pos(5, 1), Direction.NORTH),
        Order(pos(0, 65535), Direction.EAST),
    ]
    assert parse_orders(serialize_orders(orders)) == orders


def test_parse_orders_from_lines() -> None:
    assert parse_orders(["o 1 2 N\n", "", "o 3 4 S"]) == [
        Order(pos(1, 2), Direction.NORTH),
        Order(pos(3, 4), Direction.SOUTH),
    ]


@pytest.mark.parametrize(
    "bad_line", ["o 1 2", "x 1 2 N", "o 1 2 Q", "o 1 2 -", "o a 2 N", "o 1 2 n"]
)
def test_parse_orders_rejects_malformed(bad_line: str) -> None:
    with pytest.raises(ProtocolError):
        parse_orders(bad_line)
