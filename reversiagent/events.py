"""
Typed event dataclasses, the shared language between the turn driver and any consumer.

The driver (driver.py) yields these. The CLI display, the transcript writer
and the tests consume them. All events are frozen so they can be passed around
freely and serialized via dataclasses.asdict().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from reversiagent.board import Board, Move

Phase = Literal["opening", "standard"]
GameOverReason = Literal["server", "interrupted"]


@dataclass(frozen=True)
class ConnectedEvent:
    host: str
    port: int
    player: int
    game_minutes: float
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class StateReceivedEvent:
    turn: int
    round: int
    t1: float
    t2: float
    board: Board
    is_my_turn: bool


@dataclass(frozen=True)
class MalformedMessageEvent:
    error: str
    raw: str


@dataclass(frozen=True)
class MoveSentEvent:
    move: Move
    phase: Phase
    candidates: tuple[Move, ...]
    round: int


@dataclass(frozen=True)
class PassEvent:
    """Our turn, but no legal move exists. Nothing is sent."""
    round: int


@dataclass(frozen=True)
class GameOverEvent:
    reason: GameOverReason
    last_board: Board
    timestamp: datetime = field(default_factory=datetime.now)


# Union type for type-safe pattern matching in consumers
AgentEvent = (
    ConnectedEvent
    | StateReceivedEvent
    | MalformedMessageEvent
    | MoveSentEvent
    | PassEvent
    | GameOverEvent
)
