"""Abstract interfaces for the game layer.

UI code depends on :class:`IGameSession`, not on the concrete session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.enums import Color
    from chesslite.core.types import Coordinate


class ClickOutcome(IntEnum):
    """What a click on a square did to the session."""

    IGNORED = auto()  # nothing selected and no own piece under the click
    SELECTED = auto()
    MOVED = auto()
    REJECTED = auto()


class IGameSession(ABC):
    """Turn and selection bookkeeping around a single :class:`Board`."""

    @property
    @abstractmethod
    def board(self) -> Board: ...

    @property
    @abstractmethod
    def turn(self) -> Color: ...

    @property
    @abstractmethod
    def selected(self) -> Coordinate | None: ...

    @abstractmethod
    def new_game(self) -> None:
        """Reset to the starting position with white to move."""

    @abstractmethod
    def click(self, coord: Coordinate) -> ClickOutcome:
        """Select an own piece, or complete a move from the selection."""

    @abstractmethod
    def submit_move(self, start: Coordinate, end: Coordinate) -> bool:
        """Try a move for the side to move.  ``True`` when applied."""
