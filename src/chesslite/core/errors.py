"""Exceptions raised by the core for caller misuse."""

from __future__ import annotations

from typing import Any


class ChessError(Exception):
    """Base class for chesslite errors."""


class InvalidCoordinate(ChessError, ValueError):
    """A coordinate lies outside the 8x8 board or is not a (row, col) pair."""

    def __init__(self, coordinate: Any) -> None:
        self.coordinate = coordinate
        super().__init__(f"Invalid coordinate: {coordinate!r}")
