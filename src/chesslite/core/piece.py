"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesslite.core import rules
from chesslite.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.types import Coordinate

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Single letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    def is_valid_move(self, board: Board, start: Coordinate, end: Coordinate) -> bool:
        """Whether this piece may go from *start* to *end* on *board*."""
        return rules.is_valid_move(self, board, start, end)
