"""Dense views of a :class:`ants_api.state.WorldState`.

Snapshots store sparse position lists. Agents that want array maths (flood
fills, visibility masks, feature planes for learned policies) can convert a
snapshot into ``numpy`` grids here. Later layers overwrite earlier ones in the
order land, water, food, hill, dead ant, live ant.
"""

from enum import IntEnum
from typing import Iterable, Tuple

import numpy as np

from ants_api.position import Position
from ants_api.state import WorldState

NO_OWNER = -1


class Cell(IntEnum):
    """Cell codes used in :func:`world_to_grid`."""

    LAND = 0
    WATER = 1
    FOOD = 2
    HILL = 3
    DEAD = 4
    ANT = 5


def _shape(bounds: Position) -> Tuple[int, int]:
    if bounds.row <= 0 or bounds.col <= 0:
        raise ValueError(f"Map bounds must be positive, got {bounds}")
    return bounds.row, bounds.col


def _layers(world: WorldState) -> Iterable[Tuple[Cell, int, Iterable[Position]]]:
    yield Cell.WATER, NO_OWNER, world.waters
    yield Cell.FOOD, NO_OWNER, world.foods
    for player, hills in enumerate(world.hills):
        yield Cell.HILL, player, hills
    for player, ants in enumerate(world.dead_ants):
        yield Cell.DEAD, player, ants
    for player, ants in enumerate(world.live_ants):
        yield Cell.ANT, player, ants


def world_to_grid(world: WorldState, bounds: Position) -> np.ndarray:
    """Return an ``int8`` array of :class:`Cell` codes shaped ``(rows, cols)``.

    Positions outside ``bounds`` are wrapped onto the map.
    """
    rows, cols = _shape(bounds)
    grid = np.full((rows, cols), Cell.LAND, dtype=np.int8)
    for cell, _, positions in _layers(world):
        for p in positions:
            grid[p.row % rows, p.col % cols] = cell
    return grid


def owner_grid(world: WorldState, bounds: Position) -> np.ndarray:
    """Return an ``int16`` array of owning player per cell (``NO_OWNER`` if none)."""
    rows, cols = _shape(bounds)
    grid = np.full((rows, cols), NO_OWNER, dtype=np.int16)
    for _, owner, positions in _layers(world):
        for p in positions:
            grid[p.row % rows, p.col % cols] = owner
    return grid


def _glyph(cell: int, owner: int, on_own_hill: bool) -> str:
    if cell == Cell.WATER:
        return "%"
    if cell == Cell.FOOD:
        return "*"
    if cell == Cell.HILL:
        return str(owner % 10)
    if cell == Cell.DEAD:
        return "!"
    if cell == Cell.ANT:
        letter = chr(ord("a") + owner % 26)
        return letter.upper() if on_own_hill else letter
    return "."


def render_ascii(world: WorldState, bounds: Position) -> str:
    """Render the snapshot in the engine's map notation.

    ``.`` land, ``%`` water, ``*`` food, ``!`` dead ant, ``0``-``9`` hills,
    ``a``-``z`` live ants and ``A``-``Z`` for an ant standing on its own hill.
    """
    cells = world_to_grid(world, bounds)
    owners = owner_grid(world, bounds)
    rows, cols = cells.shape
    own_hills = {
        (p.row % rows, p.col % cols, player)
        for player, hills in enumerate(world.hills)
        for p in hills
    }
    lines = []
    for r in range(rows):
        lines.append(
            "".join(
                _glyph(
                    int(cells[r, c]),
                    int(owners[r, c]),
                    (r, c, int(owners[r, c])) in own_hills,
                )
                for c in range(cols)
            )
        )
    return "\n".join(lines) + "\n"
