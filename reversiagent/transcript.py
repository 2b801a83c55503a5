"""
Game transcript. Writes every driver event of one game to a text file.

One file per game, named by timestamp and player number. Each event is a
block with the round, whose turn it was, the board, and what we sent.

Files land in ./logs/ by default (created automatically).
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from reversiagent.board import count_pieces
from reversiagent.events import (
    AgentEvent,
    ConnectedEvent,
    GameOverEvent,
    MalformedMessageEvent,
    MoveSentEvent,
    PassEvent,
    StateReceivedEvent,
)
from reversiagent.renderer import render_ascii

_SEP = "=" * 60
_THIN = "-" * 60


class GameTranscript:
    def __init__(self, log_dir: Path, player: int, game_id: str | None = None) -> None:
        log_dir.mkdir(parents=True, exist_ok=True)
        game_id = game_id or datetime.now().strftime("%Y%m%d_%H%M%S")
        self._path = log_dir / f"game_{game_id}_player{player}.log"
        self._write(
            f"{_SEP}\n"
            f"  Reversi Agent — Game Transcript\n"
            f"  Player {player}\n"
            f"  Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n"
            f"{_SEP}\n"
        )

    # ------------------------------------------------------------------ #
    # Public API                                                           #
    # ------------------------------------------------------------------ #

    def record(self, event: AgentEvent) -> None:
        match event:
            case ConnectedEvent():
                self._write(
                    f"\nConnected to {event.host}:{event.port} as player {event.player}, "
                    f"{event.game_minutes:g} minute game\n"
                )
            case StateReceivedEvent():
                owner = "ours" if event.is_my_turn else f"player {event.turn}"
                self._write(
                    "\n".join([
                        f"\n{_THIN}",
                        f"Round {event.round} | turn: {owner} | "
                        f"clocks: {event.t1:.1f}s / {event.t2:.1f}s",
                        render_ascii(event.board),
                    ]) + "\n"
                )
            case MoveSentEvent():
                self._write(
                    f"SENT {event.move[0]},{event.move[1]} ({event.phase}) "
                    f"from {len(event.candidates)} candidates\n"
                )
            case PassEvent():
                self._write("PASS (no legal moves)\n")
            case MalformedMessageEvent():
                self._write(f"\nMALFORMED: {event.error}\n  raw: {event.raw!r}\n")
            case GameOverEvent():
                counts = count_pieces(event.last_board)
                self._write(
                    f"\n{_SEP}\n"
                    f"  Game over ({event.reason})\n"
                    f"  Final pieces: X={counts[1]}  O={counts[2]}\n"
                    f"{_SEP}\n"
                )

    # ------------------------------------------------------------------ #
    # Internal                                                             #
    # ------------------------------------------------------------------ #

    def _write(self, text: str) -> None:
        with self._path.open("a", encoding="utf-8") as f:
            f.write(text)

    @property
    def path(self) -> Path:
        return self._path
