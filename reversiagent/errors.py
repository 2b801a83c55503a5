"""
Exception hierarchy for the agent.

Protocol problems (what the server said) and connection problems (whether we
can talk to it at all) are separate branches so callers can react to each
without string matching:

    ReversiError
    ├── ProtocolError
    │   ├── DecodeError
    │   │   ├── GameOver          sentinel turn value, clean termination
    │   │   └── Truncated         too few fields to fill the board
    │   └── PlayerMismatchError   greeting disagrees with configured player
    ├── AgentConnectionError
    │   ├── ConnectionClosedError peer closed (zero-length read)
    │   └── TransportError        refused / reset / timed out
    └── StrategyError             strategy picked a non-candidate move
"""

from __future__ import annotations


class ReversiError(Exception):
    """Base class for every error raised by reversiagent."""


class ProtocolError(ReversiError):
    """Invalid or unexpected wire content."""


class DecodeError(ProtocolError):
    """A board-state message could not be turned into a GameState."""

    def __init__(self, message: str, raw: str = "") -> None:
        self.raw = raw
        super().__init__(message)


class GameOver(DecodeError):
    """The server sent the game-over sentinel instead of a turn owner."""


class Truncated(DecodeError):
    """The message has fewer fields than a full board needs."""

    def __init__(self, field_count: int, required: int, raw: str = "") -> None:
        self.field_count = field_count
        self.required = required
        super().__init__(
            f"Message has {field_count} fields, need at least {required} to fill the board",
            raw,
        )


class PlayerMismatchError(ProtocolError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Player number mismatch: expected {expected}, got {actual}")


class AgentConnectionError(ReversiError):
    """Transport-level failure, distinct from protocol errors."""


class ConnectionClosedError(AgentConnectionError):
    def __init__(self, message: str = "Connection closed by server") -> None:
        super().__init__(message)


class TransportError(AgentConnectionError):
    """Wraps the underlying OSError / TimeoutError as __cause__."""


class StrategyError(ReversiError):
    """Raised when a strategy returns a move it was not offered."""
