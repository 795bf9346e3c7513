"""Move orders.

An :class:`Order` pairs the position of one of our ants with a
:class:`Direction`. ``MOVE_DIRECTIONS`` is the canonical ordered list of
directions that actually produce an ``o`` line on the wire; ``STAY`` exists so
agents can express "leave this ant alone" without special casing, and is
dropped by the serializer.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import List

from ants_api.position import Position


class Direction(StrEnum):
    """Movement directions, valued by their wire letter."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    STAY = "-"

    @property
    def reverse(self) -> "Direction":
        """Opposite direction (``STAY`` is its own reverse)."""
        return _REVERSE[self]


_REVERSE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.STAY: Direction.STAY,
}

MOVE_DIRECTIONS = [Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST]


@dataclass(frozen=True)
class Order:
    """A single ant order.

    Attributes:
        pos: Current position of the ant.
        dir: Where it should go.
    """

    pos: Position
    dir: Direction

    def target_pos(self, bounds: Position) -> Position:
        """Destination of this order on a toroidal map.

        Arguments:
            bounds: Map size as ``Position(rows, cols)``; see
                :attr:`ants_api.params.GameParameters.bounds`.

        Returns:
            Position: The neighbouring cell in ``dir``, wrapped into
            ``[0, rows) x [0, cols)``. ``STAY`` returns ``pos`` unchanged.
        """
        rows, cols = bounds.row, bounds.col
        row, col = self.pos.row, self.pos.col
        if self.dir == Direction.NORTH:
            return Position((row + rows - 1) % rows, col)
        if self.dir == Direction.SOUTH:
            return Position((row + 1) % rows, col)
        if self.dir == Direction.WEST:
            return Position(row, (col + cols - 1) % cols)
        if self.dir == Direction.EAST:
            return Position(row, (col + 1) % cols)
        return self.pos

    def reverse(self, bounds: Position) -> "Order":
        """The same move as seen from its destination, pointing back."""
        return Order(self.target_pos(bounds), self.dir.reverse)


Orders = List[Order]
