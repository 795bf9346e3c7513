"""Per-turn world snapshots.

Every ``go``-terminated block from the engine describes the visible world from
scratch; nothing is carried over from the previous turn. A block is read into
a mutable :class:`WorldStateBuilder` and frozen into a :class:`WorldState`
once the terminator is seen, so agents only ever receive complete snapshots.

Design notes:

* Collections are persistent vectors (``pyrsistent.PVector``) in insertion
    order. Order carries no game meaning but keeps snapshots reproducible and
    comparable in tests.
* Per-player collections are indexed by player number. They grow on demand
    and any gap is an empty vector, never a missing entry. Reading a player
    that was never seen yields an empty vector rather than an error.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ants_api.position import Position
from ants_api.types import PlayerIndex

_EMPTY: PVector[Position] = pvector()


def _for_player(
    store: PVector[PVector[Position]], player: PlayerIndex
) -> PVector[Position]:
    if 0 <= player < len(store):
        return store[player]
    return _EMPTY


@dataclass(frozen=True)
class WorldState:
    """Immutable snapshot of one turn.

    Attributes:
        foods (PVector[Position]): Food cells.
        waters (PVector[Position]): Impassable water cells.
        live_ants (PVector[PVector[Position]]): Live ants per player.
        dead_ants (PVector[PVector[Position]]): Ants that died last turn, per player.
        hills (PVector[PVector[Position]]): Hills per player.
    """

    foods: PVector[Position] = pvector()
    waters: PVector[Position] = pvector()
    live_ants: PVector[PVector[Position]] = pvector()
    dead_ants: PVector[PVector[Position]] = pvector()
    hills: PVector[PVector[Position]] = pvector()

    def live_ants_for(self, player: PlayerIndex) -> PVector[Position]:
        return _for_player(self.live_ants, player)

    def dead_ants_for(self, player: PlayerIndex) -> PVector[Position]:
        return _for_player(self.dead_ants, player)

    def hills_for(self, player: PlayerIndex) -> PVector[Position]:
        return _for_player(self.hills, player)

    def max_player_count(self) -> int:
        """Number of player slots seen in any per-player collection."""
        return max(len(self.live_ants), len(self.dead_ants), len(self.hills))

    def my_ants(self) -> PVector[Position]:
        """Live ants of the receiving player (always index 0 on the wire)."""
        return self.live_ants_for(0)

    def enemy_ants(self) -> Iterator[Tuple[PlayerIndex, Position]]:
        """Yield ``(player, position)`` for every visible opponent ant."""
        for player, ants in enumerate(self.live_ants):
            if player == 0:
                continue
            for ant in ants:
                yield player, ant


def _ensure_player(store: List[List[Position]], player: PlayerIndex) -> List[Position]:
    while len(store) <= player:
        store.append([])
    return store[player]


@dataclass
class WorldStateBuilder:
    """Mutable accumulator for one world block.

    Each ``add_*`` call records one wire record. Owners are zero based; the
    per-player lists are extended with empty entries up to and including
    ``owner``. Call :meth:`build` to obtain the immutable snapshot.
    """

    foods: List[Position] = field(default_factory=list)
    waters: List[Position] = field(default_factory=list)
    live_ants: List[List[Position]] = field(default_factory=list)
    dead_ants: List[List[Position]] = field(default_factory=list)
    hills: List[List[Position]] = field(default_factory=list)

    def add_water(self, row: int, col: int) -> None:
        self.waters.append(Position(row, col))

    def add_food(self, row: int, col: int) -> None:
        self.foods.append(Position(row, col))

    def add_hill(self, row: int, col: int, owner: PlayerIndex) -> None:
        _ensure_player(self.hills, owner).append(Position(row, col))

    def add_live_ant(self, row: int, col: int, owner: PlayerIndex) -> None:
        _ensure_player(self.live_ants, owner).append(Position(row, col))

    def add_dead_ant(self, row: int, col: int, owner: PlayerIndex) -> None:
        _ensure_player(self.dead_ants, owner).append(Position(row, col))

    def build(self) -> WorldState:
        """Convert the mutable lists to persistent vectors."""
        return WorldState(
            foods=pvector(self.foods),
            waters=pvector(self.waters),
            live_ants=pvector(pvector(ants) for ants in self.live_ants),
            dead_ants=pvector(pvector(ants) for ants in self.dead_ants),
            hills=pvector(pvector(hills) for hills in self.hills),
        )


@dataclass(frozen=True)
class Score:
    """Final scores, one per player index, announced in the end block."""

    per_player: PVector[int] = pvector()
