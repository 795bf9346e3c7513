"""Line codec for the Ants engine protocol.

Parsing functions consume an iterator of text lines. Each call advances the
shared iterator exactly past the block it reads (``ready`` or ``go``
terminator included) and returns the parsed value; there is no other parser
state, so the driver can hand the same iterator from one call to the next.

Grammar (whitespace separated tokens, one record per line)::

    setup block   <key> <int> ... ready
    world block   w|f <row> <col>
                  h|a|d <row> <col> <owner> ... go
    end block     players <N>
                  score <v0> ... <vN-1>
                  <world block>
    orders        o <row> <col> N|S|E|W

Failure policy is asymmetric. A bad setup line is an engine quirk the agent
can live with, so by default it is logged and skipped. A bad world record
means both sides disagree about the game, so it always raises
:class:`ants_api.errors.ProtocolError`.
"""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from pyrsistent import pvector

from ants_api.config import DEFAULT_CONFIG, ProtocolConfig
from ants_api.errors import ParameterError, ProtocolError
from ants_api.orders import Direction, Order
from ants_api.params import GameParameters
from ants_api.position import Position
from ants_api.state import Score, WorldState, WorldStateBuilder
from ants_api.types import (
    GO,
    MAX_COORDINATE,
    MAX_PLAYER,
    MAX_SCORE,
    ORDER,
    PLAYERS,
    READY,
    SCORE,
)
from ants_api.utils.tokens import parse_integer

log = logging.getLogger(__name__)


def _next_line(lines: Iterator[str], expecting: str) -> str:
    """Return the next non-blank, stripped line or fail on end of input."""
    for line in lines:
        line = line.strip()
        if line:
            return line
    raise ProtocolError(f"Unexpected end of input while reading {expecting}")


def parse_game_parameters(
    lines: Iterator[str], config: Optional[ProtocolConfig] = None
) -> GameParameters:
    """Read the turn-0 block up to and including ``ready``.

    Arguments:
        lines: Line iterator positioned just after ``turn 0``.
        config: Parse policy; ``strict_parameters`` turns every rejected line
            into a ``ProtocolError``.

    Returns:
        GameParameters: Parameters with every accepted assignment applied;
        fields never assigned keep their default of zero.

    Raises:
        ProtocolError: Input ended before ``ready``, or a line was rejected
            in strict mode.
    """
    config = config or DEFAULT_CONFIG
    params = GameParameters()
    while True:
        line = _next_line(lines, "game parameters")
        tokens = line.split()
        if tokens == [READY]:
            return params
        if len(tokens) != 2:
            if config.strict_parameters:
                raise ProtocolError("Malformed game parameter line", line)
            log.warning("Malformed game parameter line %r; ignored", line)
            continue
        key, value = tokens
        try:
            params = params.put(key, value, strict=config.strict_parameters)
        except ParameterError as e:
            raise ProtocolError(str(e), line) from e


def _coordinates(tokens: Sequence[str], line: str) -> Tuple[int, int]:
    row = parse_integer(tokens[0], 0, MAX_COORDINATE)
    col = parse_integer(tokens[1], 0, MAX_COORDINATE)
    if row is None or col is None:
        raise ProtocolError("Invalid row/col", line)
    return row, col


def _owner(token: str, line: str) -> int:
    owner = parse_integer(token, 0, MAX_PLAYER)
    if owner is None:
        raise ProtocolError("Invalid owner in world record", line)
    return owner


RecordHandler = Callable[[WorldStateBuilder, Sequence[str], str], None]


def _cell_record(add: Callable[[WorldStateBuilder, int, int], None]) -> RecordHandler:
    def handle(builder: WorldStateBuilder, args: Sequence[str], line: str) -> None:
        if len(args) != 2:
            raise ProtocolError("Expected '<tag> <row> <col>'", line)
        add(builder, *_coordinates(args, line))

    return handle


def _owned_record(add: Callable[[WorldStateBuilder, int, int, int], None]) -> RecordHandler:
    def handle(builder: WorldStateBuilder, args: Sequence[str], line: str) -> None:
        if len(args) != 3:
            raise ProtocolError("Expected '<tag> <row> <col> <owner>'", line)
        row, col = _coordinates(args, line)
        add(builder, row, col, _owner(args[2], line))

    return handle


RECORD_HANDLERS: Dict[str, RecordHandler] = {
    "w": _cell_record(WorldStateBuilder.add_water),
    "f": _cell_record(WorldStateBuilder.add_food),
    "h": _owned_record(WorldStateBuilder.add_hill),
    "a": _owned_record(WorldStateBuilder.add_live_ant),
    "d": _owned_record(WorldStateBuilder.add_dead_ant),
}
"""World record tag -> handler applying it to a builder."""


def parse_world_state(lines: Iterator[str]) -> WorldState:
    """Read one world block up to and including ``go``.

    Raises:
        ProtocolError: Unknown tag, wrong arity, a field that is not an
            in-range unsigned integer, or input ending before ``go``.
    """
    builder = WorldStateBuilder()
    while True:
        line = _next_line(lines, "world state")
        tag, *args = line.split()
        if tag == GO and not args:
            return builder.build()
        handler = RECORD_HANDLERS.get(tag)
        if handler is None:
            raise ProtocolError("Unknown world record", line)
        handler(builder, args, line)


def parse_end(lines: Iterator[str]) -> Tuple[WorldState, Score]:
    """Read the end-of-game block that follows the ``end`` keyword.

    Returns:
        Tuple[WorldState, Score]: Final snapshot and per-player scores.

    Raises:
        ProtocolError: Wrong header keywords, non-numeric counts or scores,
            or a score count that differs from the announced player count.
    """
    line = _next_line(lines, "players line")
    tokens = line.split()
    players = None
    if len(tokens) == 2 and tokens[0] == PLAYERS:
        players = parse_integer(tokens[1], 0, MAX_PLAYER)
    if players is None:
        raise ProtocolError("Expected 'players <N>'", line)

    line = _next_line(lines, "score line")
    keyword, *values = line.split()
    if keyword != SCORE:
        raise ProtocolError("Expected 'score' keyword", line)
    scores: List[int] = []
    for value in values:
        score = parse_integer(value, 0, MAX_SCORE)
        if score is None:
            raise ProtocolError(f"Invalid player score {value!r}", line)
        scores.append(score)
    if len(scores) != players:
        raise ProtocolError(
            f"Expected {players} player scores, got {len(scores)}", line
        )

    world = parse_world_state(lines)
    return world, Score(pvector(scores))


def serialize_orders(orders: Iterable[Order]) -> str:
    """Encode orders as ``o <row> <col> <dir>`` lines in input order.

    ``Direction.STAY`` orders are omitted; not sending an order is how an ant
    is told to stay put.
    """
    out: List[str] = []
    for order in orders:
        if order.dir == Direction.STAY:
            log.debug("Skipping stationary order at %s", order.pos)
            continue
        out.append(f"{ORDER} {order.pos.row} {order.pos.col} {order.dir.value}\n")
    return "".join(out)


def parse_orders(source: Union[str, Iterable[str]]) -> List[Order]:
    """Decode ``o`` lines produced by :func:`serialize_orders`.

    Arguments:
        source: Either the serialized text or an iterable of lines. Blank
            lines are skipped.

    Raises:
        ProtocolError: A line is not a well-formed moving order.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    orders: List[Order] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        tokens = line.split()
        if len(tokens) != 4 or tokens[0] != ORDER:
            raise ProtocolError("Expected 'o <row> <col> <dir>'", line)
        row, col = _coordinates(tokens[1:3], line)
        try:
            direction = Direction(tokens[3])
        except ValueError as e:
            raise ProtocolError("Invalid order direction", line) from e
        if direction == Direction.STAY:
            raise ProtocolError("Stationary orders are not sent on the wire", line)
        orders.append(Order(Position(row, col), direction))
    return orders
