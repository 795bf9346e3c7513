from dataclasses import dataclass, field
from textwrap import dedent
from typing import List, Optional, Sequence

from ants_api.agent import Agent
from ants_api.orders import Order
from ants_api.params import GameParameters
from ants_api.state import Score, WorldState

SETUP_BLOCK = """\
turn 0
loadtime 3000
turntime 1000
rows 20
cols 20
turns 500
viewradius2 55
attackradius2 5
spawnradius2 1
player_seed 42
ready
"""

EXPECTED_PARAMS = GameParameters(
    loadtime_ms=3000,
    turntime_ms=1000,
    rows=20,
    cols=20,
    turns=500,
    viewradius2=55,
    attackradius2=5,
    spawnradius2=1,
    player_seed=42,
)


def make_lines(text: str) -> List[str]:
    """Split an indented multi-line literal into protocol lines."""
    return dedent(text).strip("\n").splitlines()


@dataclass
class RecordingAgent(Agent):
    """Agent that records every callback and replays fixed orders."""

    orders: Sequence[Order] = ()
    calls: List[str] = field(default_factory=list)
    params: Optional[GameParameters] = None
    worlds: List[WorldState] = field(default_factory=list)
    turns: List[int] = field(default_factory=list)
    final_world: Optional[WorldState] = None
    score: Optional[Score] = None

    def prepare(self, params: GameParameters) -> None:
        self.calls.append("prepare")
        self.params = params

    def make_turn(
        self, params: GameParameters, world: WorldState, turn: int
    ) -> Sequence[Order]:
        self.calls.append("make_turn")
        assert params == self.params
        self.worlds.append(world)
        self.turns.append(turn)
        return list(self.orders)

    def at_end(self, params: GameParameters, world: WorldState, score: Score) -> None:
        self.calls.append("at_end")
        assert params == self.params
        self.final_world = world
        self.score = score
