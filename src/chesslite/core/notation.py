"""Human-readable move text for history panels.

Display only: nothing in the rules engine reads these strings back.
"""

from __future__ import annotations

from collections.abc import Sequence

from chesslite.core.move import Move
from chesslite.core.types import square_name

CASTLE_KINGSIDE = "O-O"
CASTLE_QUEENSIDE = "O-O-O"


def move_to_notation(move: Move) -> str:
    """Long algebraic text, e.g. ``Ng1f3``, ``e4xd5``, ``O-O``."""
    if move.is_castling:
        if move.to_pos.col > move.from_pos.col:
            return CASTLE_KINGSIDE
        return CASTLE_QUEENSIDE

    capture = "x" if move.is_capture else ""
    return (
        f"{move.piece.letter}{square_name(move.from_pos)}"
        f"{capture}{square_name(move.to_pos)}"
    )


def move_history_rows(history: Sequence[Move]) -> list[tuple[int, str, str]]:
    """Group history into numbered (white, black) rows.

    The black column is empty while the last row awaits black's reply.
    """
    rows: list[tuple[int, str, str]] = []
    for i in range(0, len(history), 2):
        white = move_to_notation(history[i])
        black = move_to_notation(history[i + 1]) if i + 1 < len(history) else ""
        rows.append((i // 2 + 1, white, black))
    return rows
