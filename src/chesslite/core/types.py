"""Board coordinates and algebraic helpers.

Board layout (row-major, black at the top):
    row 0 = black back rank (a8..h8)
    row 7 = white back rank (a1..h1)

Squares are also addressed by a flat index ``row * 8 + col`` inside
:class:`~chesslite.core.board.Board`.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """A square on the board."""

    row: int
    col: int

    @property
    def on_board(self) -> bool:
        return in_bounds(self.row, self.col)

    @property
    def index(self) -> int:
        """Flat slot index ``row * 8 + col``."""
        return self.row * BOARD_SIZE + self.col

    @classmethod
    def from_index(cls, index: int) -> Position:
        return cls(index // BOARD_SIZE, index % BOARD_SIZE)

    def offset(self, drow: int, dcol: int) -> Position | None:
        """Shifted square, or ``None`` when it falls off the board."""
        row = self.row + drow
        col = self.col + dcol
        if not in_bounds(row, col):
            return None
        return Position(row, col)

    def __str__(self) -> str:
        return square_name(self)


def square_name(pos: Position) -> str:
    """Algebraic name, e.g. ``Position(7, 4)`` → ``'e1'``."""
    return chr(ord("a") + pos.col) + str(BOARD_SIZE - pos.row)


def parse_square(name: str) -> Position:
    """Parse algebraic name, e.g. ``'e4'`` → ``Position(4, 4)``."""
    if len(name) != 2:
        raise ValueError(f"Invalid square name: {name!r}")
    col = ord(name[0].lower()) - ord("a")
    if not name[1].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    row = BOARD_SIZE - int(name[1])
    if not in_bounds(row, col):
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(row, col)
