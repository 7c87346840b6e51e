"""Abstract interfaces for the game/session layer.

Sessions depend on :class:`IGameStore`, never on a concrete store, so a
remote backend or a per-test in-memory store can be injected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class GameRecord:
    """Stored document for one game.

    ``board`` is the plain record produced by
    :func:`chesslite.core.serialization.board_to_dict`. ``version`` is
    bumped by the store on every write.
    """

    board: dict[str, Any]
    white_player: str | None = None
    black_player: str | None = None
    version: int = field(default=0, compare=False)


StoreCallback = Callable[[GameRecord], None]
Unsubscribe = Callable[[], None]


class IGameStore(ABC):
    """Persistence and change notification for game records.

    Writes are last-writer-wins: the store offers no compare-and-swap.
    """

    @abstractmethod
    def get(self, game_id: str) -> GameRecord | None:
        """Current record for *game_id*, or ``None`` if it does not exist."""

    @abstractmethod
    def put(self, game_id: str, record: GameRecord) -> GameRecord:
        """Store *record* and return it as stored (with its new version)."""

    @abstractmethod
    def subscribe(self, game_id: str, callback: StoreCallback) -> Unsubscribe:
        """Call *callback* after every write to *game_id*.

        Returns a function that removes the subscription.
        """
