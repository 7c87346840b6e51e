"""In-memory game store."""

from __future__ import annotations

import copy
import logging
from collections import defaultdict
from dataclasses import replace

from chesslite.game.interfaces import GameRecord, IGameStore, StoreCallback, Unsubscribe

_LOGGER = logging.getLogger(__name__)


class InMemoryGameStore(IGameStore):
    """Dictionary-backed store scoped to one instance.

    Records are deep-copied on the way in and out so callers can never
    alias stored state. Subscribers are notified synchronously, in
    subscription order, after each ``put``.
    """

    __slots__ = ("_records", "_subscribers")

    def __init__(self) -> None:
        self._records: dict[str, GameRecord] = {}
        self._subscribers: defaultdict[str, list[StoreCallback]] = defaultdict(list)

    def get(self, game_id: str) -> GameRecord | None:
        record = self._records.get(game_id)
        return copy.deepcopy(record) if record is not None else None

    def put(self, game_id: str, record: GameRecord) -> GameRecord:
        previous = self._records.get(game_id)
        version = previous.version + 1 if previous is not None else 1
        stored = replace(copy.deepcopy(record), version=version)
        self._records[game_id] = stored
        _LOGGER.debug("Stored game %s at version %d", game_id, version)
        self._notify(game_id, stored)
        return copy.deepcopy(stored)

    def subscribe(self, game_id: str, callback: StoreCallback) -> Unsubscribe:
        callbacks = self._subscribers[game_id]
        callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def _notify(self, game_id: str, record: GameRecord) -> None:
        for cb in list(self._subscribers.get(game_id, ())):
            try:
                cb(copy.deepcopy(record))
            except Exception:
                _LOGGER.exception("Subscriber for game %s failed", game_id)
