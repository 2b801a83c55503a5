"""
Turn driver — the core orchestrator.

This module is UI-agnostic. It yields typed AgentEvent objects and never
prints, never writes files, and has no Rich/CLI dependencies.

Per message:

    read → decode → (not our turn: wait)
                  → (our turn: candidates → strategy → send)

Consumers:
  CLI        → reversiagent/cli/display.py
  Transcript → reversiagent/transcript.py
  Tests      → async for event in driver.run(): assert ...

Usage:
    driver = TurnDriver(connection, strategy, player=1)
    async for event in driver.run():
        display_event(event)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import AsyncGenerator, Protocol

from reversiagent.board import Board, Move, empty_board, first_n_moves, legal_moves, opponent
from reversiagent.errors import DecodeError, GameOver, StrategyError
from reversiagent.events import (
    AgentEvent,
    GameOverEvent,
    MalformedMessageEvent,
    MoveSentEvent,
    PassEvent,
    Phase,
    StateReceivedEvent,
)
from reversiagent.protocol import GameState, decode
from reversiagent.strategies.base import Strategy

logger = logging.getLogger(__name__)

DEFAULT_OPENING_MOVES = 4


class MessageChannel(Protocol):
    """What the driver needs from a connection. ServerConnection satisfies it."""

    async def read_message(self) -> str: ...

    async def send_move(self, move: Move) -> None: ...


@dataclass
class DriverState:
    """Everything the driver remembers between messages."""

    opening_done: bool = False
    opening_count: int = 0
    last_board: Board = field(default_factory=empty_board)


class TurnDriver:
    """
    Drives one game for one player.

    Args:
        channel: Source of raw messages and sink for moves.
        strategy: Picks a move from the candidates on each of our turns.
        player: Our player number (1 or 2).
        opening_moves: Number of our turns governed by free center placement.
        state: Starting state; a fresh DriverState if omitted.
    """

    def __init__(
        self,
        channel: MessageChannel,
        strategy: Strategy,
        player: int,
        *,
        opening_moves: int = DEFAULT_OPENING_MOVES,
        state: DriverState | None = None,
    ) -> None:
        opponent(player)  # rejects anything but 1 / 2
        self._channel = channel
        self._strategy = strategy
        self.player = player
        self._opening_moves = opening_moves
        self.state = state if state is not None else DriverState()

    async def run(
        self,
        stop_event: asyncio.Event | None = None,
    ) -> AsyncGenerator[AgentEvent, None]:
        """
        Process messages until the server ends the game, yielding an event for each step.

        The generator completes after a GameOverEvent (server sentinel, or
        stop_event set). ConnectionClosedError and TransportError from the
        channel propagate to the caller.
        """
        while True:
            if stop_event and stop_event.is_set():
                yield GameOverEvent(reason="interrupted", last_board=self.state.last_board)
                return

            raw = await self._channel.read_message()

            try:
                game_state = decode(raw)
            except GameOver:
                logger.info("Server signalled game over")
                yield GameOverEvent(reason="server", last_board=self.state.last_board)
                return
            except DecodeError as exc:
                logger.warning("Failed to parse message: %s", exc)
                yield MalformedMessageEvent(error=str(exc), raw=raw)
                continue

            # Always track the newest board, whoever's turn it is.
            self.state.last_board = game_state.board
            is_my_turn = game_state.turn == self.player
            logger.debug(
                "Round %d: turn=%d t1=%.2f t2=%.2f",
                game_state.round, game_state.turn, game_state.t1, game_state.t2,
            )
            yield StateReceivedEvent(
                turn=game_state.turn,
                round=game_state.round,
                t1=game_state.t1,
                t2=game_state.t2,
                board=game_state.board,
                is_my_turn=is_my_turn,
            )

            if is_my_turn:
                yield await self._take_turn(game_state)

    def next_candidates(self) -> tuple[Phase, list[Move]]:
        """
        Advance the opening bookkeeping for one of our turns and return the move pool.

        During the opening the pool is the empty center cells; once those run
        out, or the opening turn budget is spent, it is the flanking moves on
        the last known board.
        """
        if not self.state.opening_done:
            self.state.opening_count += 1
            if self.state.opening_count <= self._opening_moves:
                opening = first_n_moves(self.state.last_board)
                if opening:
                    return "opening", opening
            else:
                self.state.opening_done = True
        return "standard", legal_moves(self.state.last_board, self.player)

    async def _take_turn(self, game_state: GameState) -> MoveSentEvent | PassEvent:
        phase, candidates = self.next_candidates()

        if not candidates:
            # No pass token exists on the wire; the server moves on by itself.
            logger.info("Round %d: no legal moves, passing", game_state.round)
            return PassEvent(round=game_state.round)

        move = await self._strategy.choose_move(candidates)
        if move not in candidates:
            raise StrategyError(
                f"{self._strategy!r} chose {move!r}, which is not one of {candidates}"
            )

        await self._channel.send_move(move)
        logger.info("Round %d: sent %s move %s", game_state.round, phase, move)
        return MoveSentEvent(
            move=move,
            phase=phase,
            candidates=tuple(candidates),
            round=game_state.round,
        )
