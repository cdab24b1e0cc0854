"""Tests for the per-piece legality predicates."""

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.rules import is_diagonal, is_straight, is_valid_move

W_KING = Piece(Color.WHITE, PieceType.KING)
W_QUEEN = Piece(Color.WHITE, PieceType.QUEEN)
W_BISHOP = Piece(Color.WHITE, PieceType.BISHOP)
W_KNIGHT = Piece(Color.WHITE, PieceType.KNIGHT)
W_ROOK = Piece(Color.WHITE, PieceType.ROOK)
W_PAWN = Piece(Color.WHITE, PieceType.PAWN)
B_PAWN = Piece(Color.BLACK, PieceType.PAWN)


class TestGeometry:
    def test_diagonal(self) -> None:
        assert is_diagonal((0, 0), (7, 7))
        assert is_diagonal((5, 2), (3, 4))
        assert not is_diagonal((0, 0), (1, 2))

    def test_straight(self) -> None:
        assert is_straight((3, 0), (3, 7))
        assert is_straight((0, 4), (6, 4))
        assert not is_straight((0, 0), (1, 1))


class TestKing:
    @pytest.mark.parametrize("end", [(3, 3), (3, 5), (4, 4), (5, 5), (4, 3)])
    def test_one_step_any_direction(self, board: Board, end: tuple[int, int]) -> None:
        assert W_KING.is_valid_move(board, (4, 4), end)

    @pytest.mark.parametrize("end", [(2, 4), (4, 6), (6, 6), (2, 3)])
    def test_longer_steps_rejected(self, board: Board, end: tuple[int, int]) -> None:
        assert not W_KING.is_valid_move(board, (4, 4), end)

    def test_zero_length_accepted(self, board: Board) -> None:
        assert W_KING.is_valid_move(board, (4, 4), (4, 4))


class TestQueen:
    @pytest.mark.parametrize("end", [(7, 7), (0, 0), (4, 0), (0, 4), (1, 7)])
    def test_lines_and_diagonals(self, board: Board, end: tuple[int, int]) -> None:
        assert W_QUEEN.is_valid_move(board, (4, 4), end)

    def test_knight_shape_rejected(self, board: Board) -> None:
        assert not W_QUEEN.is_valid_move(board, (4, 4), (6, 5))

    def test_zero_length_accepted(self, board: Board) -> None:
        assert W_QUEEN.is_valid_move(board, (4, 4), (4, 4))


class TestBishop:
    def test_diagonal_only(self, board: Board) -> None:
        assert W_BISHOP.is_valid_move(board, (0, 2), (5, 7))
        assert not W_BISHOP.is_valid_move(board, (0, 2), (0, 5))
        assert not W_BISHOP.is_valid_move(board, (0, 2), (2, 3))

    def test_zero_length_accepted(self, board: Board) -> None:
        assert W_BISHOP.is_valid_move(board, (0, 2), (0, 2))


class TestRook:
    def test_straight_only(self, board: Board) -> None:
        assert W_ROOK.is_valid_move(board, (0, 0), (5, 0))
        assert W_ROOK.is_valid_move(board, (0, 0), (0, 7))
        assert not W_ROOK.is_valid_move(board, (0, 0), (1, 1))

    def test_zero_length_accepted(self, board: Board) -> None:
        assert W_ROOK.is_valid_move(board, (0, 0), (0, 0))


class TestKnight:
    @pytest.mark.parametrize(
        "end", [(6, 5), (6, 3), (2, 5), (2, 3), (5, 6), (5, 2), (3, 6), (3, 2)]
    )
    def test_all_eight_jumps(self, board: Board, end: tuple[int, int]) -> None:
        assert W_KNIGHT.is_valid_move(board, (4, 4), end)

    @pytest.mark.parametrize("end", [(4, 4), (5, 5), (6, 6), (4, 6), (5, 4), (7, 5)])
    def test_other_shapes_rejected(self, board: Board, end: tuple[int, int]) -> None:
        assert not W_KNIGHT.is_valid_move(board, (4, 4), end)


class TestPawn:
    def test_white_moves_up(self, board: Board) -> None:
        assert W_PAWN.is_valid_move(board, (3, 3), (4, 3))
        assert not W_PAWN.is_valid_move(board, (3, 3), (2, 3))

    def test_black_moves_down(self, board: Board) -> None:
        assert B_PAWN.is_valid_move(board, (4, 3), (3, 3))
        assert not B_PAWN.is_valid_move(board, (4, 3), (5, 3))

    def test_no_double_step(self, board: Board) -> None:
        assert not W_PAWN.is_valid_move(board, (1, 3), (3, 3))
        assert not B_PAWN.is_valid_move(board, (6, 3), (4, 3))

    def test_no_sideways_or_zero_length(self, board: Board) -> None:
        assert not W_PAWN.is_valid_move(board, (3, 3), (3, 4))
        assert not W_PAWN.is_valid_move(board, (3, 3), (3, 3))

    def test_diagonal_needs_occupied_square(self, board: Board) -> None:
        # (6, 2) holds a black pawn, (3, 2) is empty.
        assert W_PAWN.is_valid_move(board, (5, 3), (6, 2))
        assert not W_PAWN.is_valid_move(board, (2, 3), (3, 2))

    def test_diagonal_ignores_capture_color(self, board: Board) -> None:
        # (1, 1) holds a white pawn.
        assert W_PAWN.is_valid_move(board, (0, 2), (1, 1))

    def test_straight_step_ignores_occupancy(self, board: Board) -> None:
        assert W_PAWN.is_valid_move(board, (5, 0), (6, 0))

    def test_diagonal_two_files_rejected(self, board: Board) -> None:
        assert not W_PAWN.is_valid_move(board, (5, 2), (6, 4))


class TestPurity:
    def test_predicates_do_not_mutate(self, board: Board) -> None:
        before = board.copy()
        for row in range(8):
            for col in range(8):
                piece = board[(row, col)]
                if piece is None:
                    continue
                for end in [(r, c) for r in range(8) for c in range(8)]:
                    is_valid_move(piece, board, (row, col), end)
        assert board == before
