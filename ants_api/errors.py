"""Exceptions raised by the protocol codec and the turn-loop driver."""

from typing import Optional


class ProtocolError(ValueError):
    """The engine and the player have lost synchronization.

    Raised for any input the driver cannot act on safely: malformed turn
    records, unexpected top-level lines, inconsistent end blocks and
    truncated input. The offending line (if any) is kept on ``line``.
    """

    def __init__(self, reason: str, line: Optional[str] = None) -> None:
        self.reason = reason
        self.line = line
        if line is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason}: {line!r}")


class ParameterError(ValueError):
    """A game parameter assignment was rejected in strict mode."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"{reason} (key {key!r}, value {value!r})")
