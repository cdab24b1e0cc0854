"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesslite.core.board import Board
from chesslite.game.session import GameSession


@pytest.fixture
def board() -> Board:
    """Fresh board in the starting position."""
    return Board.setup()


@pytest.fixture
def session() -> GameSession:
    """Session with white to move and nothing selected."""
    return GameSession()
