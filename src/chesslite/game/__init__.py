"""Game management layer — turn order and square selection.

Quick start::

    from chesslite.game import GameSession

    session = GameSession()
    session.events.on_invalid_move.append(lambda s, e: print("Invalid move"))
    session.click((1, 4))  # select the white e-pawn
    session.click((2, 4))  # move it; black to move
"""

from chesslite.game.interfaces import ClickOutcome, IGameSession
from chesslite.game.session import GameSession, SessionEvents

__all__ = [
    # Interfaces
    "ClickOutcome",
    "IGameSession",
    # Concrete
    "GameSession",
    "SessionEvents",
]
