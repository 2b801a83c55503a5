"""
ASCII board rendering, shared by the CLI display and the transcript.

    0 1 2 3 4 5 6 7
  0 . . . . . . . .
  ...
  3 . . . O X . . .
"""

from __future__ import annotations

from reversiagent.board import BOARD_SIZE, EMPTY, PLAYER_ONE, PLAYER_TWO, Board, Move

SYMBOLS = {EMPTY: ".", PLAYER_ONE: "X", PLAYER_TWO: "O"}
CANDIDATE_SYMBOL = "*"


def render_ascii(board: Board, highlight: list[Move] | tuple[Move, ...] = ()) -> str:
    """Board as text, row/column indices on the edges. `highlight` cells show as '*'."""
    marked = set(highlight)
    lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
    for row in range(BOARD_SIZE):
        cells = [
            CANDIDATE_SYMBOL if (row, col) in marked else SYMBOLS.get(board[row][col], "?")
            for col in range(BOARD_SIZE)
        ]
        lines.append(f"{row} " + " ".join(cells))
    return "\n".join(lines)
