"""Agent contract.

The driver talks to game logic exclusively through :class:`Agent`. Concrete
bots subclass it and implement the three callbacks; the library never looks
inside.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from ants_api.orders import Order
from ants_api.params import GameParameters
from ants_api.state import Score, WorldState


class Agent(ABC):
    """Callbacks invoked by :class:`ants_api.driver.GameDriver`.

    Call order is always ``prepare`` once, ``make_turn`` once per turn starting
    at turn 1, then ``at_end`` once. The engine, not the library, enforces the
    time budgets announced in :class:`GameParameters`.
    """

    @abstractmethod
    def prepare(self, params: GameParameters) -> None:
        """Called after the setup block, before any turn."""

    @abstractmethod
    def make_turn(
        self, params: GameParameters, world: WorldState, turn: int
    ) -> Iterable[Order]:
        """Return the orders for ``turn``; they are sent in the order given."""

    @abstractmethod
    def at_end(self, params: GameParameters, world: WorldState, score: Score) -> None:
        """Called once with the final snapshot and scores. Nothing follows."""
