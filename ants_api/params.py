"""Game parameters sent by the engine in the turn-0 block.

The engine announces nine integer settings as ``<key> <value>`` lines. They
are fixed for the whole game, so :class:`GameParameters` is a frozen
dataclass; :meth:`GameParameters.put` returns a new instance rather than
assigning in place.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict

from ants_api.errors import ParameterError
from ants_api.position import Position
from ants_api.types import MAX_PARAMETER, MIN_PARAMETER
from ants_api.utils.tokens import parse_integer

log = logging.getLogger(__name__)

# Wire key -> dataclass field
PARAMETER_KEYS: Dict[str, str] = {
    "loadtime": "loadtime_ms",
    "turntime": "turntime_ms",
    "rows": "rows",
    "cols": "cols",
    "turns": "turns",
    "viewradius2": "viewradius2",
    "attackradius2": "attackradius2",
    "spawnradius2": "spawnradius2",
    "player_seed": "player_seed",
}


@dataclass(frozen=True)
class GameParameters:
    """Immutable game configuration.

    Attributes:
        loadtime_ms (int): Time given to the bot to start up after ``ready``.
        turntime_ms (int): Time given to the bot each turn.
        rows (int): Number of map rows.
        cols (int): Number of map columns.
        turns (int): Maximum number of turns in the game.
        viewradius2 (int): View radius squared.
        attackradius2 (int): Battle radius squared.
        spawnradius2 (int): Food gathering radius squared (the name is a
            historical artifact of the engine).
        player_seed (int): Seed for the random number generator, useful for
            reproducing games.
    """

    loadtime_ms: int = 0
    turntime_ms: int = 0
    rows: int = 0
    cols: int = 0
    turns: int = 0
    viewradius2: int = 0
    attackradius2: int = 0
    spawnradius2: int = 0
    player_seed: int = 0

    @property
    def bounds(self) -> Position:
        """Map size as a ``Position`` for :meth:`ants_api.orders.Order.target_pos`."""
        return Position(self.rows, self.cols)

    def put(self, key: str, value: str, strict: bool = False) -> "GameParameters":
        """Return a copy with the field named by wire ``key`` set to ``value``.

        Unknown keys and values that do not parse as signed 64-bit integers
        leave the parameters unchanged and are logged, unless ``strict`` is
        set, in which case they raise.

        Raises:
            ParameterError: Only when ``strict`` is True and the assignment
                is rejected.
        """
        field = PARAMETER_KEYS.get(key)
        if field is None:
            return self._reject(key, value, "Unknown game parameter key", strict)
        number = parse_integer(value, MIN_PARAMETER, MAX_PARAMETER)
        if number is None:
            return self._reject(key, value, "Game parameter value is not an integer", strict)
        return replace(self, **{field: number})

    def _reject(self, key: str, value: str, reason: str, strict: bool) -> "GameParameters":
        if strict:
            raise ParameterError(key, value, reason)
        log.warning("%s (key %r, value %r); ignored", reason, key, value)
        return self
