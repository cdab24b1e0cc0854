"""Per-piece movement legality.

Each predicate only looks at the geometry of the move, plus the
destination square for pawn captures.  Nothing here checks for blocked
paths, captures of one's own pieces, or check.  A zero-length move is
judged by the same formula as any other move.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesslite.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.piece import Piece
    from chesslite.core.types import Coordinate

Predicate = Callable[["Piece", "Board", "Coordinate", "Coordinate"], bool]

# Row delta of a single pawn step.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}


def _deltas(start: Coordinate, end: Coordinate) -> tuple[int, int]:
    return abs(start[0] - end[0]), abs(start[1] - end[1])


def is_diagonal(start: Coordinate, end: Coordinate) -> bool:
    dr, dc = _deltas(start, end)
    return dr == dc


def is_straight(start: Coordinate, end: Coordinate) -> bool:
    return start[0] == end[0] or start[1] == end[1]


# -- Predicates ---------------------------------------------------------------


def _king(piece: Piece, board: Board, start: Coordinate, end: Coordinate) -> bool:
    dr, dc = _deltas(start, end)
    return dr <= 1 and dc <= 1


def _queen(piece: Piece, board: Board, start: Coordinate, end: Coordinate) -> bool:
    return is_diagonal(start, end) or is_straight(start, end)


def _bishop(piece: Piece, board: Board, start: Coordinate, end: Coordinate) -> bool:
    return is_diagonal(start, end)


def _knight(piece: Piece, board: Board, start: Coordinate, end: Coordinate) -> bool:
    return _deltas(start, end) in ((1, 2), (2, 1))


def _rook(piece: Piece, board: Board, start: Coordinate, end: Coordinate) -> bool:
    return is_straight(start, end)


def _pawn(piece: Piece, board: Board, start: Coordinate, end: Coordinate) -> bool:
    if end[0] != start[0] + PAWN_DIRECTION[piece.color]:
        return False
    if end[1] == start[1]:
        return True
    # Diagonal step only onto an occupied square, whatever its color.
    return abs(start[1] - end[1]) == 1 and board[end] is not None


_PREDICATES: dict[PieceType, Predicate] = {
    PieceType.KING: _king,
    PieceType.QUEEN: _queen,
    PieceType.BISHOP: _bishop,
    PieceType.KNIGHT: _knight,
    PieceType.ROOK: _rook,
    PieceType.PAWN: _pawn,
}


def is_valid_move(
    piece: Piece, board: Board, start: Coordinate, end: Coordinate
) -> bool:
    """Whether *piece* may move from *start* to *end* on *board*.

    Pure: the board is only read, and an illegal move is reported as
    ``False`` rather than raised.
    """
    return _PREDICATES[piece.piece_type](piece, board, start, end)
