"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn advance (white moves towards row 0)."""
        return -1 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> Color:
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid color: {text!r}") from None


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> PieceType:
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece type: {text!r}") from None


class CastlingPolicy(IntEnum):
    """How strictly a two-column king move is validated.

    ``SIMPLIFIED`` only requires that the king does not land in check and
    never offers castling destinations to the player. ``FULLY_LEGAL``
    additionally checks unmoved king/rook, a clear path and no transit
    through attacked squares, and offers the destinations.
    """

    SIMPLIFIED = 0
    FULLY_LEGAL = 1


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
