"""GameSession — turn alternation and square selection for one board.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.piece import Piece
from chesslite.core.types import Coordinate, validate_coordinate
from chesslite.game.interfaces import ClickOutcome, IGameSession

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Coordinate, Coordinate, Piece], None]  # start, end, piece
InvalidMoveCallback = Callable[[Coordinate, Coordinate], None]
TurnCallback = Callable[[Color], None]
SelectionCallback = Callable[[Coordinate | None], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_invalid_move: list[InvalidMoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Two humans sharing one board: selects pieces, applies moves,
    switches turns, notifies listeners.

    Thread-safety: a session and its board must be driven from a single
    thread.
    """

    __slots__ = ("_board", "_turn", "_selected", "events")

    def __init__(self) -> None:
        self._board = Board.setup()
        self._turn = Color.WHITE
        self._selected: Coordinate | None = None
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def selected(self) -> Coordinate | None:
        return self._selected

    # ── IGameSession impl ────────────────────────────────────────────────

    def new_game(self) -> None:
        self._board = Board.setup()
        self._set_selected(None)
        if self._turn != Color.WHITE:
            self._turn = Color.WHITE
            self._emit_turn_changed()

    def click(self, coord: Coordinate) -> ClickOutcome:
        coord = validate_coordinate(coord)

        if self._selected is None:
            piece = self._board.piece_at(coord)
            if piece is None or piece.color != self._turn:
                return ClickOutcome.IGNORED
            self._set_selected(coord)
            return ClickOutcome.SELECTED

        start = self._selected
        try:
            moved = self.submit_move(start, coord)
        finally:
            self._set_selected(None)
        return ClickOutcome.MOVED if moved else ClickOutcome.REJECTED

    def submit_move(self, start: Coordinate, end: Coordinate) -> bool:
        start = validate_coordinate(start)
        end = validate_coordinate(end)

        piece = self._board.piece_at(start)
        if piece is None or piece.color != self._turn:
            _LOGGER.debug(
                "Rejected %s -> %s: no %s piece on origin", start, end, self._turn
            )
            self._emit_invalid_move(start, end)
            return False

        if not self._board.move_piece(start, end):
            _LOGGER.debug(
                "Rejected %s -> %s: illegal for %s", start, end, piece.piece_type.name
            )
            self._emit_invalid_move(start, end)
            return False

        _LOGGER.debug("%s %s %s -> %s", self._turn, piece.piece_type.name, start, end)
        self._emit_move(start, end, piece)
        self.switch_turn()
        return True

    def switch_turn(self) -> None:
        self._turn = self._turn.opposite
        self._emit_turn_changed()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selected(self, coord: Coordinate | None) -> None:
        if coord == self._selected:
            return
        self._selected = coord
        for cb in self.events.on_selection_changed:
            cb(coord)

    def _emit_move(self, start: Coordinate, end: Coordinate, piece: Piece) -> None:
        for cb in self.events.on_move:
            cb(start, end, piece)

    def _emit_invalid_move(self, start: Coordinate, end: Coordinate) -> None:
        for cb in self.events.on_invalid_move:
            cb(start, end)

    def _emit_turn_changed(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._turn)
