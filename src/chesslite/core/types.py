"""Coordinate type alias and helpers.

Board layout (row, col), both 0-7:
    row 0 is white's back rank, row 7 is black's back rank;
    col 0 is the a-file, col 7 is the h-file.
"""

from __future__ import annotations

from typing import Any, TypeAlias

from chesslite.core.errors import InvalidCoordinate

Coordinate: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 8


def is_valid_coordinate(coord: Any) -> bool:
    """Whether *coord* is a (row, col) pair inside the board."""
    try:
        row, col = coord
    except (TypeError, ValueError):
        return False
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if not 0 <= value < BOARD_SIZE:
            return False
    return True


def validate_coordinate(coord: Any) -> Coordinate:
    """Return *coord* as a ``(row, col)`` tuple or raise :class:`InvalidCoordinate`."""
    if not is_valid_coordinate(coord):
        raise InvalidCoordinate(coord)
    row, col = coord
    return (row, col)
