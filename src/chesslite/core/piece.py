"""Pieces as immutable values that carry their own square."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesslite.core.enums import Color, PieceType
from chesslite.core.types import Position

# Indexed by ``PieceType - 1`` (pawn .. king).
_SYMBOLS: dict[Color, str] = {
    Color.WHITE: "♙♘♗♖♕♔",
    Color.BLACK: "♟♞♝♜♛♚",
}
_LETTERS = " NBRQK"


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece standing on ``position``.

    ``has_moved`` is sticky: once a piece has moved it stays ``True`` for
    the rest of the game (castling under the full rules reads it).
    """

    piece_type: PieceType
    color: Color
    position: Position
    has_moved: bool = False

    def moved_to(self, position: Position) -> Piece:
        """Copy relocated to *position* and flagged as moved."""
        return replace(self, position=position, has_moved=True)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.color][self.piece_type - 1]

    @property
    def letter(self) -> str:
        """Notation letter, ``''`` for pawns."""
        return _LETTERS[self.piece_type - 1].strip()

    def __str__(self) -> str:
        return f"{self.color} {self.piece_type} on {self.position}"
