"""ants_api
==========

Client library for bots playing the Ants AI Challenge over its line
protocol. Implement :class:`Agent` and hand it to :func:`run_game_stdio`::

    from ants_api import Agent, Direction, run_game_stdio

    class Bot(Agent):
        def prepare(self, params): ...
        def make_turn(self, params, world, turn):
            return [ant.order(Direction.NORTH) for ant in world.my_ants()]
        def at_end(self, params, world, score): ...

    run_game_stdio(Bot())
"""

from .agent import Agent
from .config import ProtocolConfig
from .driver import GameDriver, GameResult, TurnPhase, run_game, run_game_stdio
from .errors import ParameterError, ProtocolError
from .orders import MOVE_DIRECTIONS, Direction, Order, Orders
from .params import GameParameters
from .position import Position, pos, wrap_position
from .state import Score, WorldState, WorldStateBuilder

__all__ = [
    "Agent",
    "Direction",
    "GameDriver",
    "GameParameters",
    "GameResult",
    "MOVE_DIRECTIONS",
    "Order",
    "Orders",
    "ParameterError",
    "Position",
    "ProtocolConfig",
    "ProtocolError",
    "Score",
    "TurnPhase",
    "WorldState",
    "WorldStateBuilder",
    "pos",
    "run_game",
    "run_game_stdio",
    "wrap_position",
]
