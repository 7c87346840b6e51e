"""Move history record."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.piece import Piece
from chesslite.core.types import Position, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a single applied move.

    ``piece`` is the snapshot taken before the move, so its position equals
    ``from_pos`` and its ``has_moved`` flag reflects the old state.
    """

    from_pos: Position
    to_pos: Position
    piece: Piece
    captured_piece: Piece | None = None
    is_castling: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    def __str__(self) -> str:
        return f"{square_name(self.from_pos)}{square_name(self.to_pos)}"
