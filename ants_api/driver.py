"""Turn-loop driver.

:class:`GameDriver` is the only component aware of sequencing. It reads
top-level lines, delegates each block to :mod:`ants_api.codec`, calls the
:class:`ants_api.agent.Agent` and writes the response::

    AWAITING_SETUP --turn 0--> IN_TURN --turn n--> IN_TURN --end--> ENDED

Everything runs synchronously on the caller's thread: read a block, call the
agent, write the answer, then read again. The driver never reads past the
block it is handling and imposes no timeouts; the engine owns the clock.

Any line the state machine cannot place raises
:class:`ants_api.errors.ProtocolError` and stops the loop. Agents only ever
see fully parsed blocks.
"""

import logging
import sys
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Iterator, List, Optional, TextIO

from ants_api.agent import Agent
from ants_api.codec import parse_end, parse_game_parameters, parse_world_state, serialize_orders
from ants_api.config import DEFAULT_CONFIG, ProtocolConfig
from ants_api.errors import ProtocolError
from ants_api.params import GameParameters
from ants_api.state import Score, WorldState
from ants_api.types import END, GO, TURN, LineSink, LineSource
from ants_api.utils.tokens import parse_integer

log = logging.getLogger(__name__)

ACK = GO + "\n"


class TurnPhase(StrEnum):
    """Driver states."""

    AWAITING_SETUP = auto()
    IN_TURN = auto()
    ENDED = auto()


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished game, also handed to ``Agent.at_end``.

    Attributes:
        params (GameParameters): Parameters from the setup block.
        world (WorldState): Final snapshot from the end block.
        score (Score): Final scores.
        turns (int): Number of turns played (0 if none).
    """

    params: GameParameters
    world: WorldState
    score: Score
    turns: int


class GameDriver:
    """Runs a single game against one agent.

    Attributes:
        agent (Agent): Callback target.
        config (ProtocolConfig): Parse policy.
        phase (TurnPhase): Current state.
        params (GameParameters | None): Set once the setup block is read.
        turn (int): Last turn handed to the agent.
    """

    def __init__(self, agent: Agent, config: Optional[ProtocolConfig] = None) -> None:
        self.agent = agent
        self.config = config or DEFAULT_CONFIG
        self.phase = TurnPhase.AWAITING_SETUP
        self.params: Optional[GameParameters] = None
        self.turn = 0

    def run(self, lines: LineSource, write: LineSink) -> GameResult:
        """Consume ``lines`` until the end block and return the result.

        Arguments:
            lines: Engine output, one line per item (trailing newlines are
                fine).
            write: Receives each complete response, ``go`` included.

        Returns:
            GameResult: The same values passed to ``Agent.at_end``.

        Raises:
            ProtocolError: On any desynchronizing input, on input ending before
                the end block, or if this driver already ran a game.
        """
        if self.phase != TurnPhase.AWAITING_SETUP:
            raise ProtocolError(f"Driver cannot start a game in phase {self.phase}")

        it = iter(lines)
        for raw in it:
            line = raw.strip()
            if not line:
                continue
            tokens = line.split()
            if tokens[0] == TURN:
                self._on_turn(tokens, line, it, write)
            elif tokens == [END]:
                return self._on_end(line, it)
            else:
                raise ProtocolError("Unexpected input line", line)
        raise ProtocolError("Unexpected end of input before 'end'")

    def _on_turn(
        self, tokens: List[str], line: str, it: Iterator[str], write: LineSink
    ) -> None:
        if len(tokens) != 2:
            raise ProtocolError("Malformed turn line", line)

        if tokens[1] == "0":
            if self.phase != TurnPhase.AWAITING_SETUP:
                raise ProtocolError("Setup block received twice", line)
            params = parse_game_parameters(it, self.config)
            self.agent.prepare(params)
            self.params = params
            self.phase = TurnPhase.IN_TURN
            log.info("Game set up: %s", params)
            write(ACK)
            return

        if parse_integer(tokens[1], 1, sys.maxsize) is None:
            raise ProtocolError("Malformed turn line", line)
        if self.phase != TurnPhase.IN_TURN or self.params is None:
            raise ProtocolError("Turn received before setup", line)
        world = parse_world_state(it)
        orders = list(self.agent.make_turn(self.params, world, self.turn + 1))
        self.turn += 1
        log.debug("Turn %d (%s): %d orders", self.turn, line, len(orders))
        write(serialize_orders(orders) + ACK)

    def _on_end(self, line: str, it: Iterator[str]) -> GameResult:
        if self.phase != TurnPhase.IN_TURN or self.params is None:
            raise ProtocolError("End of game received before setup", line)
        world, score = parse_end(it)
        self.agent.at_end(self.params, world, score)
        self.phase = TurnPhase.ENDED
        log.info("Game over after turn %d, scores %s", self.turn, list(score.per_player))
        return GameResult(self.params, world, score, self.turn)


def run_game(
    agent: Agent,
    lines: LineSource,
    write: LineSink,
    config: Optional[ProtocolConfig] = None,
) -> GameResult:
    """Play one game with ``agent`` over an abstract line source and sink."""
    return GameDriver(agent, config).run(lines, write)


def run_game_stdio(
    agent: Agent,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    config: Optional[ProtocolConfig] = None,
) -> GameResult:
    """Play one game over the process's standard streams.

    Lines are read one at a time and stdout is flushed after every response so
    the engine sees each ``go`` immediately.
    """
    source = stdin or sys.stdin
    sink = stdout or sys.stdout

    def write(chunk: str) -> None:
        sink.write(chunk)
        sink.flush()

    return run_game(agent, iter(source.readline, ""), write, config)
