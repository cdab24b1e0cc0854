"""Board - piece placement on an 8x8 grid and the move protocol."""

from __future__ import annotations

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Coordinate, validate_coordinate

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid seeded with the standard starting position.

    :meth:`move_piece` is the only operation that changes the grid.
    Not thread-safe: each game must own its board.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = _empty_grid()
        self._place_initial_pieces()

    def _place_initial_pieces(self) -> None:
        for col in range(BOARD_SIZE):
            self._grid[1][col] = Piece(Color.WHITE, PieceType.PAWN)
            self._grid[6][col] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(BACK_RANK):
            self._grid[0][col] = Piece(Color.WHITE, pt)
            self._grid[7][col] = Piece(Color.BLACK, pt)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def setup(cls) -> Board:
        """Standard starting position."""
        return cls()

    @classmethod
    def empty(cls) -> Board:
        """Board with no pieces on it."""
        b = cls.__new__(cls)
        b._grid = _empty_grid()
        return b

    # -- Element access -----------------------------------------------------

    def piece_at(self, coord: Coordinate) -> Piece | None:
        row, col = validate_coordinate(coord)
        return self._grid[row][col]

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self.piece_at(coord)

    def is_empty(self, coord: Coordinate) -> bool:
        return self.piece_at(coord) is None

    def pieces(self, color: Color | None = None) -> list[tuple[Coordinate, Piece]]:
        """Occupied squares in row-major order, optionally only *color*'s."""
        found: list[tuple[Coordinate, Piece]] = []
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is None:
                    continue
                if color is not None and piece.color != color:
                    continue
                found.append(((row, col), piece))
        return found

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, start: Coordinate, end: Coordinate) -> bool:
        """Move the piece on *start* to *end* if its rules allow it.

        Returns ``False`` without touching the grid when *start* is empty
        or the move is illegal.  Whatever stood on *end* is dropped.

        Raises:
            InvalidCoordinate: either coordinate is off the board.
        """
        start = validate_coordinate(start)
        end = validate_coordinate(end)

        piece = self._grid[start[0]][start[1]]
        if piece is None or not piece.is_valid_move(self, start, end):
            return False

        # Clear first so a zero-length move leaves the piece in place.
        self._grid[start[0]][start[1]] = None
        self._grid[end[0]][end[1]] = piece
        return True

    def copy(self) -> Board:
        b = Board.empty()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(col) for col in range(BOARD_SIZE)))
        return "\n".join(rows)


def _empty_grid() -> list[list[Piece | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
