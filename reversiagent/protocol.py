"""
Wire codec for the Reversi server protocol.

Inbound board-state message, one field per line:

    <turn owner, or -999 when the game is over>
    <round>
    <player one clock, seconds>
    <player two clock, seconds>
    <64 cells, row-major, each 0 / 1 / 2>

Every line is newline-terminated, so a complete message splits into 69
fields (the last one is the empty remainder after the final newline).

Parsing is strict on shape and lenient on content: a message with too few
fields is rejected, but a garbled number inside a complete message falls back
to a default instead of throwing the whole board update away.

Outbound move: "<row>\\n<col>\\n".

Greeting (first message after connecting): "<player> <minutes>".
"""

from __future__ import annotations

from dataclasses import dataclass

from reversiagent.board import BOARD_SIZE, CELL_VALUES, EMPTY, Board, Move, board_from_cells
from reversiagent.errors import GameOver, ProtocolError, Truncated

GAME_OVER_SENTINEL = -999
NO_TURN_OWNER = -1

HEADER_FIELDS = 4
MESSAGE_FIELDS = HEADER_FIELDS + BOARD_SIZE * BOARD_SIZE + 1  # 69, incl. trailing remainder

# Turn owner is narrowed to a signed byte; anything outside means "nobody".
_TURN_MIN, _TURN_MAX = -128, 127


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot decoded from one board-state message."""

    turn: int       # player whose move the server awaits, NO_TURN_OWNER if none
    round: int
    t1: float       # player one's remaining clock, seconds
    t2: float       # player two's remaining clock, seconds
    board: Board

    def clock_for(self, player: int) -> float:
        return self.t1 if player == 1 else self.t2


@dataclass(frozen=True)
class Greeting:
    player: int
    game_minutes: float


# --------------------------------------------------------------------------- #
# Inbound                                                                      #
# --------------------------------------------------------------------------- #

def decode(raw: str) -> GameState:
    """
    Decode a board-state message.

    Raises:
        GameOver: the turn field carries the game-over sentinel. Checked before
                  the length check, so "-999\\n" alone is enough.
        Truncated: fewer than MESSAGE_FIELDS fields.
    """
    fields = raw.split("\n")

    turn = _parse_int(fields[0], NO_TURN_OWNER)
    if turn == GAME_OVER_SENTINEL:
        raise GameOver("Game over", raw)

    if len(fields) < MESSAGE_FIELDS:
        raise Truncated(len(fields), MESSAGE_FIELDS, raw)

    if not _TURN_MIN <= turn <= _TURN_MAX:
        turn = NO_TURN_OWNER

    cells = [
        _parse_cell(text)
        for text in fields[HEADER_FIELDS:HEADER_FIELDS + BOARD_SIZE * BOARD_SIZE]
    ]

    return GameState(
        turn=turn,
        round=_parse_int(fields[1], 0),
        t1=_parse_float(fields[2], 0.0),
        t2=_parse_float(fields[3], 0.0),
        board=board_from_cells(cells),
    )


def parse_greeting(raw: str) -> Greeting:
    """Parse "<player> <minutes>". Missing or garbled parts degrade to -1 / 0.0."""
    parts = raw.split(" ")
    player = _parse_int(parts[0], NO_TURN_OWNER)
    minutes = _parse_float(parts[1], 0.0) if len(parts) > 1 else 0.0
    return Greeting(player=player, game_minutes=minutes)


# --------------------------------------------------------------------------- #
# Outbound                                                                     #
# --------------------------------------------------------------------------- #

def encode_move(move: Move) -> str:
    row, col = move
    _validate_coord(row, col)
    return f"{row}\n{col}\n"


def decode_move(text: str) -> Move:
    """Inverse of encode_move(). Raises ProtocolError on anything else."""
    lines = text.split("\n")
    if len(lines) != 3 or lines[2] != "":
        raise ProtocolError(f"Malformed move: {text!r}")
    try:
        row, col = int(lines[0]), int(lines[1])
    except ValueError as exc:
        raise ProtocolError(f"Malformed move: {text!r}") from exc
    _validate_coord(row, col)
    return row, col


# --------------------------------------------------------------------------- #
# Internal                                                                     #
# --------------------------------------------------------------------------- #

def _parse_int(text: str, default: int) -> int:
    try:
        return int(text)
    except ValueError:
        return default


def _parse_float(text: str, default: float) -> float:
    try:
        return float(text)
    except ValueError:
        return default


def _parse_cell(text: str) -> int:
    value = _parse_int(text, EMPTY)
    return value if value in CELL_VALUES else EMPTY


def _validate_coord(row: int, col: int) -> None:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ProtocolError(f"Row/col out of bounds (0..{BOARD_SIZE - 1}): {(row, col)}")
