import unittest

from reversiagent.board import (
    BOARD_SIZE,
    DIRECTIONS,
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    board_from_cells,
    count_pieces,
    empty_board,
    first_n_moves,
    in_bounds,
    legal_moves,
    opponent,
)


def _board(pieces: dict[tuple[int, int], int]) -> tuple[tuple[int, ...], ...]:
    grid = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for (row, col), value in pieces.items():
        grid[row][col] = value
    return tuple(tuple(row) for row in grid)


_CANONICAL = _board({
    (3, 3): PLAYER_TWO,
    (4, 4): PLAYER_TWO,
    (3, 4): PLAYER_ONE,
    (4, 3): PLAYER_ONE,
})


class OpponentTests(unittest.TestCase):
    def test_opponent_is_three_minus_player(self) -> None:
        self.assertEqual(opponent(PLAYER_ONE), PLAYER_TWO)
        self.assertEqual(opponent(PLAYER_TWO), PLAYER_ONE)

    def test_invalid_players_rejected(self) -> None:
        for bad in (0, 3, -1, 999):
            with self.subTest(player=bad):
                with self.assertRaises(ValueError):
                    opponent(bad)


class BoardConstructionTests(unittest.TestCase):
    def test_empty_board_shape(self) -> None:
        board = empty_board()
        self.assertEqual(len(board), 8)
        self.assertTrue(all(len(row) == 8 for row in board))
        self.assertTrue(all(cell == EMPTY for row in board for cell in row))

    def test_board_from_cells_is_row_major(self) -> None:
        cells = [EMPTY] * 64
        cells[1] = PLAYER_ONE    # row 0, col 1
        cells[8] = PLAYER_TWO    # row 1, col 0
        board = board_from_cells(cells)
        self.assertEqual(board[0][1], PLAYER_ONE)
        self.assertEqual(board[1][0], PLAYER_TWO)

    def test_board_from_cells_rejects_wrong_length(self) -> None:
        with self.assertRaises(ValueError):
            board_from_cells([EMPTY] * 63)

    def test_board_from_cells_rejects_bad_value(self) -> None:
        with self.assertRaises(ValueError):
            board_from_cells([EMPTY] * 63 + [3])

    def test_count_pieces(self) -> None:
        self.assertEqual(count_pieces(_CANONICAL), {PLAYER_ONE: 2, PLAYER_TWO: 2})
        self.assertEqual(count_pieces(empty_board()), {PLAYER_ONE: 0, PLAYER_TWO: 0})


class FirstNMovesTests(unittest.TestCase):
    def test_empty_board_returns_all_centers_in_order(self) -> None:
        self.assertEqual(first_n_moves(empty_board()), [(3, 3), (3, 4), (4, 3), (4, 4)])

    def test_occupied_centers_are_skipped(self) -> None:
        board = _board({(3, 4): PLAYER_ONE, (4, 3): PLAYER_TWO})
        self.assertEqual(first_n_moves(board), [(3, 3), (4, 4)])

    def test_full_center_returns_empty(self) -> None:
        self.assertEqual(first_n_moves(_CANONICAL), [])


class LegalMovesTests(unittest.TestCase):
    def test_canonical_opening_for_player_one(self) -> None:
        self.assertEqual(legal_moves(_CANONICAL, PLAYER_ONE), [(2, 3), (3, 2), (4, 5), (5, 4)])

    def test_canonical_opening_for_player_two(self) -> None:
        self.assertEqual(legal_moves(_CANONICAL, PLAYER_TWO), [(2, 4), (3, 5), (4, 2), (5, 3)])

    def test_empty_board_has_no_moves(self) -> None:
        self.assertEqual(legal_moves(empty_board(), PLAYER_ONE), [])

    def test_no_moves_when_player_has_no_pieces(self) -> None:
        board = _board({(3, 3): PLAYER_TWO, (3, 4): PLAYER_TWO})
        self.assertEqual(legal_moves(board, PLAYER_ONE), [])

    def test_moves_are_only_empty_cells(self) -> None:
        board = _board({
            (0, 0): PLAYER_ONE, (0, 1): PLAYER_TWO, (0, 2): PLAYER_TWO,
            (1, 1): PLAYER_TWO, (2, 2): PLAYER_ONE, (3, 3): PLAYER_TWO,
            (5, 5): PLAYER_ONE, (6, 6): PLAYER_TWO, (2, 5): PLAYER_TWO,
        })
        for player in (PLAYER_ONE, PLAYER_TWO):
            for row, col in legal_moves(board, player):
                with self.subTest(player=player, cell=(row, col)):
                    self.assertEqual(board[row][col], EMPTY)

    def test_results_are_in_row_major_order(self) -> None:
        moves = legal_moves(_CANONICAL, PLAYER_ONE)
        self.assertEqual(moves, sorted(moves))

    def test_deterministic_and_does_not_mutate(self) -> None:
        snapshot = [list(row) for row in _CANONICAL]
        first = legal_moves(_CANONICAL, PLAYER_ONE)
        second = legal_moves(_CANONICAL, PLAYER_ONE)
        self.assertEqual(first, second)
        self.assertEqual([list(row) for row in _CANONICAL], snapshot)

    def test_flank_along_a_long_diagonal(self) -> None:
        board = _board({
            (1, 1): PLAYER_TWO, (2, 2): PLAYER_TWO, (3, 3): PLAYER_TWO,
            (4, 4): PLAYER_TWO, (5, 5): PLAYER_TWO, (6, 6): PLAYER_TWO,
            (7, 7): PLAYER_ONE,
        })
        self.assertIn((0, 0), legal_moves(board, PLAYER_ONE))

    def test_gap_in_run_breaks_flank(self) -> None:
        board = _board({(0, 1): PLAYER_TWO, (0, 3): PLAYER_ONE})
        self.assertNotIn((0, 0), legal_moves(board, PLAYER_ONE))

    def test_run_ending_at_edge_is_not_a_flank(self) -> None:
        board = _board({(0, 5): PLAYER_TWO, (0, 6): PLAYER_TWO, (0, 7): PLAYER_TWO})
        self.assertEqual(legal_moves(board, PLAYER_ONE), [])


class DirectionalRunTests(unittest.TestCase):
    """
    From an origin cell, lay `n` opponent pieces in one direction, optionally
    capped by our own piece, and check the origin is legal exactly when n >= 1
    and the cap is present.
    """

    def _run_board(
        self, origin: tuple[int, int], direction: tuple[int, int], run: int, capped: bool
    ) -> tuple[tuple[tuple[int, ...], ...], bool]:
        pieces: dict[tuple[int, int], int] = {}
        row, col = origin
        dr, dc = direction
        for step in range(1, run + 1):
            pieces[(row + dr * step, col + dc * step)] = PLAYER_TWO
        cap = (row + dr * (run + 1), col + dc * (run + 1))
        cap_on_board = in_bounds(*cap)
        if capped and cap_on_board:
            pieces[cap] = PLAYER_ONE
        return _board(pieces), capped and cap_on_board and run >= 1

    def test_runs_in_every_direction(self) -> None:
        for dr, dc in DIRECTIONS:
            # Start from the edge opposite the direction so runs of up to 6 fit.
            origin = (0 if dr > 0 else 7 if dr < 0 else 3, 0 if dc > 0 else 7 if dc < 0 else 3)
            for run in range(0, 7):
                for capped in (True, False):
                    end = (origin[0] + dr * run, origin[1] + dc * run)
                    if not in_bounds(*end):
                        continue
                    board, expected = self._run_board(origin, (dr, dc), run, capped)
                    with self.subTest(direction=(dr, dc), run=run, capped=capped):
                        self.assertEqual(origin in legal_moves(board, PLAYER_ONE), expected)

    def test_empty_between_origin_and_run_fails(self) -> None:
        for dr, dc in DIRECTIONS:
            origin = (3, 3)
            pieces = {
                (3 + 2 * dr, 3 + 2 * dc): PLAYER_TWO,
                (3 + 3 * dr, 3 + 3 * dc): PLAYER_ONE,
            }
            with self.subTest(direction=(dr, dc)):
                self.assertNotIn(origin, legal_moves(_board(pieces), PLAYER_ONE))

    def test_own_piece_adjacent_fails(self) -> None:
        for dr, dc in DIRECTIONS:
            pieces = {
                (3 + dr, 3 + dc): PLAYER_ONE,
                (3 + 2 * dr, 3 + 2 * dc): PLAYER_TWO,
                (3 + 3 * dr, 3 + 3 * dc): PLAYER_ONE,
            }
            with self.subTest(direction=(dr, dc)):
                self.assertNotIn((3, 3), legal_moves(_board(pieces), PLAYER_ONE))
