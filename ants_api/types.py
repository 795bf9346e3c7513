"""Common type aliases and protocol keywords.

``LineSource`` and ``LineSink`` are the two seams between the turn-loop
driver and the host process: the driver pulls text lines from the former and
pushes output chunks into the latter, never touching the OS streams itself.
"""

from typing import Callable, Iterable

PlayerIndex = int

LineSource = Iterable[str]
LineSink = Callable[[str], object]

# Top-level keywords
TURN = "turn"
END = "end"

# Block terminators
READY = "ready"
GO = "go"

# End block headers
PLAYERS = "players"
SCORE = "score"

# Order line tag
ORDER = "o"

# Numeric ranges of the wire fields
MAX_COORDINATE = 2**16 - 1
MAX_PLAYER = 2**8 - 1
MIN_PARAMETER = -(2**63)
MAX_PARAMETER = 2**63 - 1
MAX_SCORE = 2**64 - 1
