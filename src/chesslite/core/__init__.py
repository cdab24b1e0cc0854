"""Core domain layer — board, pieces and movement rules, no dependencies.

Quick start::

    from chesslite.core import Board

    board = Board.setup()
    board.move_piece((1, 4), (2, 4))  # white pawn one step forward
    board.piece_at((2, 4)).symbol     # '♙'
"""

from chesslite.core.board import BACK_RANK, Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.errors import ChessError, InvalidCoordinate
from chesslite.core.piece import Piece
from chesslite.core.rules import is_valid_move
from chesslite.core.types import (
    BOARD_SIZE,
    Coordinate,
    is_valid_coordinate,
    validate_coordinate,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "is_valid_coordinate",
    "validate_coordinate",
    # Errors
    "ChessError",
    "InvalidCoordinate",
    # Domain objects
    "BACK_RANK",
    "Board",
    "Piece",
    "is_valid_move",
]
