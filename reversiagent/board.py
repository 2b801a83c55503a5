"""
Board model and legal-move engine.

A board is an immutable 8x8 tuple of row tuples holding EMPTY, PLAYER_ONE or
PLAYER_TWO. The server owns the real game and sends a fresh board every turn,
so nothing here places pieces or flips them; these functions only read.

Two legality regimes:
  first_n_moves()  opening phase, free placement on the four center cells
  legal_moves()    standard Reversi flanking rule
"""

from __future__ import annotations

from typing import Iterable

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

BOARD_SIZE = 8
CELL_VALUES = (EMPTY, PLAYER_ONE, PLAYER_TWO)

Board = tuple[tuple[int, ...], ...]
Move = tuple[int, int]

# Fixed enumeration order for the opening phase.
CENTER_CELLS: tuple[Move, ...] = ((3, 3), (3, 4), (4, 3), (4, 4))

DIRECTIONS: tuple[Move, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def empty_board() -> Board:
    return tuple((EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE))


def board_from_cells(cells: Iterable[int]) -> Board:
    """
    Build a board from 64 cell values in row-major order.

    Raises:
        ValueError: wrong number of cells, or a value outside EMPTY/PLAYER_ONE/PLAYER_TWO.
    """
    flat = list(cells)
    if len(flat) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"A board needs {BOARD_SIZE * BOARD_SIZE} cells, got {len(flat)}")
    for value in flat:
        if value not in CELL_VALUES:
            raise ValueError(f"Invalid cell value {value!r}")
    return tuple(
        tuple(flat[row * BOARD_SIZE:(row + 1) * BOARD_SIZE])
        for row in range(BOARD_SIZE)
    )


def opponent(player: int) -> int:
    if player not in (PLAYER_ONE, PLAYER_TWO):
        raise ValueError(f"Player must be {PLAYER_ONE} or {PLAYER_TWO}, got {player!r}")
    return 3 - player


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def count_pieces(board: Board) -> dict[int, int]:
    """Number of pieces per player, e.g. {1: 2, 2: 2}."""
    counts = {PLAYER_ONE: 0, PLAYER_TWO: 0}
    for row in board:
        for cell in row:
            if cell in counts:
                counts[cell] += 1
    return counts


# --------------------------------------------------------------------------- #
# Legality                                                                     #
# --------------------------------------------------------------------------- #

def first_n_moves(board: Board) -> list[Move]:
    """
    Opening-phase candidates: every empty center cell, in CENTER_CELLS order.

    Returns an empty list if all four are occupied.
    """
    return [(row, col) for row, col in CENTER_CELLS if board[row][col] == EMPTY]


def legal_moves(board: Board, player: int) -> list[Move]:
    """
    All empty cells where `player` flanks at least one opponent piece.

    Cells are returned in row-major scan order, so the result is deterministic
    for a given board.
    """
    other = opponent(player)
    moves: list[Move] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row][col] != EMPTY:
                continue
            if any(_flanks(board, row, col, dr, dc, player, other) for dr, dc in DIRECTIONS):
                moves.append((row, col))
    return moves


def _flanks(board: Board, row: int, col: int, dr: int, dc: int, player: int, other: int) -> bool:
    """True if walking (dr, dc) from (row, col) crosses opponent pieces and lands on our own."""
    r, c = row + dr, col + dc
    seen_opponent = False
    while in_bounds(r, c):
        cell = board[r][c]
        if cell == other:
            seen_opponent = True
        elif cell == player:
            return seen_opponent
        else:
            return False
        r += dr
        c += dc
    return False
