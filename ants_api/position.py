"""Grid coordinates.

Positions are immutable ``(row, col)`` pairs. The constructor performs no
bounds checking; map size is only known at runtime from
:class:`ants_api.params.GameParameters` and is passed explicitly to the
wrapping helpers.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ants_api.orders import Direction, Order


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top), comparable to the Y axis.
        col: Column index (0 at left), comparable to the X axis.
    """

    row: int
    col: int

    def order(self, direction: "Direction") -> "Order":
        """Return an order moving the ant at this position in ``direction``."""
        from ants_api.orders import Order

        return Order(self, direction)


def pos(row: int, col: int) -> Position:
    """Shorthand for ``Position(row, col)``."""
    return Position(row, col)


def wrap_position(row: int, col: int, bounds: Position) -> Position:
    """Toroidal wrap of an arbitrary coordinate onto ``bounds``."""
    return Position(row % bounds.row, col % bounds.col)
