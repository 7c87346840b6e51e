"""Board — the complete, immutable game state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Position

Squares: TypeAlias = tuple[Piece | None, ...]

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class Board:
    """Snapshot of a game.

    ``squares`` holds 64 optional piece slots indexed ``row * 8 + col``.
    Boards are never mutated: transitions build a new value and share the
    unchanged tuples with their parent.

    ``is_check`` / ``is_checkmate`` describe the position for
    ``current_turn``. ``selected_piece`` and ``valid_moves`` are transient
    UI state carried alongside the game.
    """

    squares: Squares
    current_turn: Color = Color.WHITE
    is_check: bool = False
    is_checkmate: bool = False
    captured_pieces: tuple[Piece, ...] = ()
    move_history: tuple[Move, ...] = ()
    selected_piece: Piece | None = None
    valid_moves: tuple[Position, ...] = ()

    # -- Factories ------------------------------------------------------------

    @classmethod
    def empty(cls, current_turn: Color = Color.WHITE) -> Board:
        return cls(squares=(None,) * _SQUARE_COUNT, current_turn=current_turn)

    @classmethod
    def from_pieces(
        cls,
        pieces: Iterable[Piece],
        current_turn: Color = Color.WHITE,
        *,
        captured_pieces: Iterable[Piece] = (),
        move_history: Iterable[Move] = (),
        is_check: bool = False,
        is_checkmate: bool = False,
    ) -> Board:
        """Build a board from loose pieces.

        Raises ``ValueError`` if a piece stands off the board or two pieces
        claim the same square.
        """
        slots: list[Piece | None] = [None] * _SQUARE_COUNT
        for piece in pieces:
            if not piece.position.on_board:
                raise ValueError(f"Piece off the board: {piece.position!r}")
            idx = piece.position.index
            if slots[idx] is not None:
                raise ValueError(f"Two pieces on square {piece.position}")
            slots[idx] = piece
        return cls(
            squares=tuple(slots),
            current_turn=current_turn,
            is_check=is_check,
            is_checkmate=is_checkmate,
            captured_pieces=tuple(captured_pieces),
            move_history=tuple(move_history),
        )

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        pieces: list[Piece] = []
        for col in range(BOARD_SIZE):
            pieces.append(Piece(PieceType.PAWN, Color.WHITE, Position(6, col)))
            pieces.append(Piece(PieceType.PAWN, Color.BLACK, Position(1, col)))
        for col, pt in enumerate(_BACK_RANK):
            pieces.append(Piece(pt, Color.WHITE, Position(7, col)))
            pieces.append(Piece(pt, Color.BLACK, Position(0, col)))
        return cls.from_pieces(pieces)

    # -- Queries --------------------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self.piece_at(pos)

    def piece_at(self, pos: Position) -> Piece | None:
        """Occupant of *pos*; off-board squares are always empty."""
        if not pos.on_board:
            return None
        return self.squares[pos.index]

    def is_empty(self, pos: Position) -> bool:
        return self.piece_at(pos) is None

    @property
    def pieces(self) -> tuple[Piece, ...]:
        """All pieces on the board in square order."""
        return tuple(p for p in self.squares if p is not None)

    def pieces_of(self, color: Color) -> list[Piece]:
        return [p for p in self.squares if p is not None and p.color == color]

    def king_of(self, color: Color) -> Piece | None:
        """The king of *color*, or ``None`` on an inconsistent board."""
        for p in self.squares:
            if p is not None and p.piece_type == PieceType.KING and p.color == color:
                return p
        return None

    # -- Dunder helpers -------------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self.squares[row * BOARD_SIZE + col]
                if p is None:
                    cells.append(".")
                    continue
                char = p.letter or "P"
                cells.append(char if p.color == Color.WHITE else char.lower())
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def relocate(squares: Squares, piece: Piece, to_pos: Position) -> Squares:
    """Slots after moving *piece* onto *to_pos*, dropping any occupant there."""
    slots = list(squares)
    slots[piece.position.index] = None
    slots[to_pos.index] = piece.moved_to(to_pos)
    return tuple(slots)


def initial_board() -> Board:
    return Board.initial()


def piece_at(board: Board, pos: Position) -> Piece | None:
    return board.piece_at(pos)
