"""GameSession — one participant's view of a stored game.

Coordinates: IGameStore, the rules engine and the participant's seat.
Emits events via simple callbacks so a UI or tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chesslite.core.board import Board
from chesslite.core.enums import CastlingPolicy, Color, GameResult
from chesslite.core.rules import Rules, apply_move
from chesslite.core.serialization import board_from_dict, board_to_dict
from chesslite.core.types import Position
from chesslite.game.interfaces import GameRecord, IGameStore, Unsubscribe

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

BoardCallback = Callable[[Board], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """A player (or spectator) attached to one game in a store.

    Every accepted move is written back as a full board snapshot; other
    sessions on the same game learn about it through the store
    subscription.
    """

    __slots__ = (
        "_store",
        "_game_id",
        "_player_id",
        "_policy",
        "_color",
        "_joined",
        "_record",
        "_board",
        "_unsubscribe",
        "events",
    )

    def __init__(
        self,
        store: IGameStore,
        game_id: str,
        player_id: str,
        policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
    ) -> None:
        self._store = store
        self._game_id = game_id
        self._player_id = player_id
        self._policy = policy
        self._color: Color | None = None
        self._joined = False
        self._record: GameRecord | None = None
        self._board: Board | None = None
        self._unsubscribe: Unsubscribe | None = None
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game_id(self) -> str:
        return self._game_id

    @property
    def player_id(self) -> str:
        return self._player_id

    @property
    def color(self) -> Color | None:
        """Seat color, or ``None`` for spectators (and before joining)."""
        return self._color

    @property
    def is_spectator(self) -> bool:
        return self._joined and self._color is None

    @property
    def board(self) -> Board:
        if self._board is None:
            raise RuntimeError("Session has not joined a game")
        return self._board

    @property
    def is_player_turn(self) -> bool:
        return self._color is not None and self.board.current_turn == self._color

    @property
    def opponent_joined(self) -> bool:
        record = self._record
        if record is None or self._color is None:
            return False
        if self._color == Color.WHITE:
            return record.black_player is not None
        return record.white_player is not None

    # ── Lifecycle ────────────────────────────────────────────────────────

    def join(self) -> Color | None:
        """Create or join the game and take a seat.

        The creator plays white. A returning player gets their old seat
        back; otherwise the first free seat is claimed. When both seats are
        taken the session spectates and ``None`` is returned.
        """
        record = self._store.get(self._game_id)
        if record is None:
            record = GameRecord(
                board=board_to_dict(Board.initial()),
                white_player=self._player_id,
            )
            record = self._store.put(self._game_id, record)
            color: Color | None = Color.WHITE
        elif record.white_player == self._player_id:
            color = Color.WHITE
        elif record.black_player == self._player_id:
            color = Color.BLACK
        elif record.white_player is None:
            record = self._store.put(
                self._game_id, replace(record, white_player=self._player_id)
            )
            color = Color.WHITE
        elif record.black_player is None:
            record = self._store.put(
                self._game_id, replace(record, black_player=self._player_id)
            )
            color = Color.BLACK
        else:
            color = None

        self._color = color
        self._joined = True
        self._set_record(record)
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(
                self._game_id, self._on_store_update
            )

        _LOGGER.info(
            "Player %s joined game %s as %s",
            self._player_id,
            self._game_id,
            color if color is not None else "spectator",
        )
        return color

    def leave(self) -> None:
        """Stop listening for store updates."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ── Commands ─────────────────────────────────────────────────────────

    def legal_moves(self, pos: Position) -> list[Position]:
        """Legal destinations for the piece on *pos* in the current board."""
        return Rules.legal_moves(self.board, pos, self._policy)

    def submit_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Play a move for this seat. Returns True if legal and stored."""
        if self._record is None or self._board is None:
            return False
        board = self._board
        if self._color is None:
            _LOGGER.debug("Spectator %s cannot move", self._player_id)
            return False
        if board.is_checkmate:
            _LOGGER.debug("Game %s is over; move ignored", self._game_id)
            return False
        if board.current_turn != self._color:
            _LOGGER.debug("Not %s's turn in game %s", self._color, self._game_id)
            return False
        if not Rules.is_legal_move(board, from_pos, to_pos, self._policy):
            _LOGGER.debug(
                "Illegal move %s%s in game %s", from_pos, to_pos, self._game_id
            )
            return False

        next_board = apply_move(board, from_pos, to_pos, self._policy)
        record = replace(self._record, board=board_to_dict(next_board))
        self._set_record(self._store.put(self._game_id, record))
        _LOGGER.info(
            "Game %s: %s played %s%s", self._game_id, self._color, from_pos, to_pos
        )
        return True

    def reset(self) -> bool:
        """Start the game over from the initial position (players only)."""
        if self._record is None or self._color is None:
            return False
        record = replace(self._record, board=board_to_dict(Board.initial()))
        self._set_record(self._store.put(self._game_id, record))
        _LOGGER.info("Game %s reset by %s", self._game_id, self._player_id)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_record(self, record: GameRecord) -> None:
        if self._record is not None and record.version < self._record.version:
            return  # stale notification
        self._record = record
        self._board = board_from_dict(record.board)

    def _on_store_update(self, record: GameRecord) -> None:
        previous = self._record
        self._set_record(record)
        if self._record is previous or self._board is None:
            return
        board = self._board
        for cb in self.events.on_board_changed:
            cb(board)
        if board.is_checkmate:
            result = Rules.game_result(board)
            for cb in self.events.on_game_over:
                cb(result)
