"""Game session layer — stores, seats and move submission.

Quick start::

    from chesslite.game import GameSession, InMemoryGameStore

    store = InMemoryGameStore()
    alice = GameSession(store, "game-1", "alice")
    alice.join()  # Color.WHITE
"""

from chesslite.game.interfaces import GameRecord, IGameStore, StoreCallback, Unsubscribe
from chesslite.game.session import GameSession, SessionEvents
from chesslite.game.store import InMemoryGameStore

__all__ = [
    # Interfaces
    "GameRecord",
    "IGameStore",
    "StoreCallback",
    "Unsubscribe",
    # Concrete
    "GameSession",
    "InMemoryGameStore",
    "SessionEvents",
]
