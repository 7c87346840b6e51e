"""Heuristic computer opponent.

Moves are scored one ply deep and a difficulty-specific selection policy
picks among them, so weaker levels deliberately play worse moves. The
opponent only uses the public engine operations (``Rules.all_legal_moves``
and ``apply_move``).
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from chesslite.core.board import Board
from chesslite.core.enums import CastlingPolicy, PieceType
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.rules import Rules, apply_move
from chesslite.core.types import Position

_LOGGER = logging.getLogger(__name__)

_PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}

_CENTER_SQUARES: frozenset[Position] = frozenset(
    (Position(3, 3), Position(3, 4), Position(4, 3), Position(4, 4))
)

_CAPTURE_BONUS = 1.2
_CHECK_BONUS = 0.5
_CHECKMATE_BONUS = 100.0
_CENTER_BONUS = 0.2


class Difficulty(StrEnum):
    """Named strength levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    GRANDMASTER = "grandmaster"


@dataclass(slots=True, frozen=True)
class ScoredMove:
    """A candidate move and its heuristic score (higher is better)."""

    from_pos: Position
    to_pos: Position
    score: float


def score_move(
    board: Board,
    from_pos: Position,
    to_pos: Position,
    difficulty: Difficulty = Difficulty.INTERMEDIATE,
    policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
) -> float:
    """Score a move from the point of view of the side to move."""
    mover = board.current_turn
    after = apply_move(board, from_pos, to_pos, policy)

    score = 0.0
    for piece in after.pieces:
        value = _PIECE_VALUES[piece.piece_type]
        score += value if piece.color == mover else -value

    captured = board[to_pos]
    if captured is not None:
        score += _PIECE_VALUES[captured.piece_type] * _CAPTURE_BONUS

    if after.is_check:
        score += _CHECK_BONUS
    if after.is_checkmate:
        score += _CHECKMATE_BONUS

    if difficulty in (Difficulty.ADVANCED, Difficulty.GRANDMASTER):
        gen = MoveGenerator(after)
        for piece in after.pieces_of(mover):
            for target in gen.legal_moves_for(piece, policy):
                if target in _CENTER_SQUARES:
                    score += _CENTER_BONUS

    return score


# ── Selection policies ───────────────────────────────────────────────────────


class SelectionPolicy(Protocol):
    """Picks one move from a list sorted best-first (never empty)."""

    def select(self, moves: list[ScoredMove], rng: random.Random) -> ScoredMove: ...


class BeginnerPolicy:
    """Random move from the worst 60%."""

    def select(self, moves: list[ScoredMove], rng: random.Random) -> ScoredMove:
        cutoff = math.floor(len(moves) * 0.4)
        pool = moves[cutoff:]
        return rng.choice(pool) if pool else moves[0]


class TopSlicePolicy:
    """With probability *top_chance* pick from the best *top_fraction*,
    otherwise pick from the best *fallback_fraction* (1.0 = any move).
    """

    __slots__ = ("_top_chance", "_top_fraction", "_fallback_fraction")

    def __init__(
        self,
        top_chance: float,
        top_fraction: float,
        fallback_fraction: float = 1.0,
    ) -> None:
        self._top_chance = top_chance
        self._top_fraction = top_fraction
        self._fallback_fraction = fallback_fraction

    def select(self, moves: list[ScoredMove], rng: random.Random) -> ScoredMove:
        if rng.random() < self._top_chance:
            return rng.choice(moves[: math.ceil(len(moves) * self._top_fraction)])
        return rng.choice(moves[: math.ceil(len(moves) * self._fallback_fraction)])


class GrandmasterPolicy:
    """One of the three best moves, occasionally any move of the top half."""

    def select(self, moves: list[ScoredMove], rng: random.Random) -> ScoredMove:
        if rng.random() < 0.9:
            return rng.choice(moves[: min(3, len(moves))])
        return rng.choice(moves[: math.ceil(len(moves) * 0.5)])


POLICIES: dict[Difficulty, SelectionPolicy] = {
    Difficulty.BEGINNER: BeginnerPolicy(),
    Difficulty.INTERMEDIATE: TopSlicePolicy(0.7, 0.5),
    Difficulty.ADVANCED: TopSlicePolicy(0.8, 0.3),
    Difficulty.GRANDMASTER: GrandmasterPolicy(),
}


# ── Player ───────────────────────────────────────────────────────────────────


class CpuPlayer:
    """Computer opponent for the side to move.

    Args:
        difficulty: Strength level selecting the move policy.
        rng: Random source; pass a seeded ``random.Random`` for repeatable
            games.
        castling: Castling rules the opponent plays by; match the
            session's policy.
    """

    __slots__ = ("_difficulty", "_policy", "_rng", "_castling")

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.INTERMEDIATE,
        rng: random.Random | None = None,
        castling: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
    ) -> None:
        self._difficulty = difficulty
        self._policy = POLICIES[difficulty]
        self._rng = rng or random.Random()
        self._castling = castling

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def castling(self) -> CastlingPolicy:
        return self._castling

    def scored_moves(self, board: Board) -> list[ScoredMove]:
        """All legal moves for the side to move, best first."""
        scored = [
            ScoredMove(
                from_pos,
                to_pos,
                score_move(board, from_pos, to_pos, self._difficulty, self._castling),
            )
            for from_pos, to_pos in Rules.all_legal_moves(
                board, policy=self._castling
            )
        ]
        scored.sort(key=lambda m: m.score, reverse=True)
        return scored

    def choose_move(self, board: Board) -> ScoredMove | None:
        """Pick a move, or ``None`` when the side to move has none."""
        moves = self.scored_moves(board)
        if not moves:
            return None
        chosen = self._policy.select(moves, self._rng)
        _LOGGER.debug(
            "%s picked %s%s (score %.2f) from %d moves",
            self._difficulty,
            chosen.from_pos,
            chosen.to_pos,
            chosen.score,
            len(moves),
        )
        return chosen

    def play(self, board: Board) -> Board:
        """Board after the chosen move; unchanged if there is none."""
        chosen = self.choose_move(board)
        if chosen is None:
            return board
        return apply_move(board, chosen.from_pos, chosen.to_pos, self._castling)
