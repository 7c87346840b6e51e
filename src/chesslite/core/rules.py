"""Board transitions and high-level rule queries."""

from __future__ import annotations

from dataclasses import replace

from chesslite.core.board import Board
from chesslite.core.enums import CastlingPolicy, Color, GameResult, PieceType
from chesslite.core.move import Move
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.types import Position

# Rook (from column, to column) keyed by the king's direction of travel.
_CASTLING_ROOK_COLS: dict[int, tuple[int, int]] = {
    1: (7, 5),
    -1: (0, 3),
}


def apply_move(
    board: Board,
    from_pos: Position,
    to_pos: Position,
    policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
) -> Board:
    """Return the board after moving the piece on *from_pos* to *to_pos*.

    Legality is the caller's business (see ``legal_moves_for``), but the
    input board itself is returned for a move onto the same square, from an
    empty square, or involving a square off the board.
    A king travelling more than one column castles: the rook of that wing
    jumps to the square the king passed over.
    """
    if from_pos == to_pos or not (from_pos.on_board and to_pos.on_board):
        return board
    piece = board[from_pos]
    if piece is None:
        return board

    is_castling = (
        piece.piece_type == PieceType.KING and abs(from_pos.col - to_pos.col) > 1
    )
    if is_castling and policy == CastlingPolicy.FULLY_LEGAL:
        if to_pos not in MoveGenerator(board).castling_moves_for(piece):
            return board

    slots = list(board.squares)
    captured_pieces = board.captured_pieces

    captured = slots[to_pos.index]
    if captured is not None:
        captured_pieces = captured_pieces + (captured,)
        slots[to_pos.index] = None

    if is_castling:
        step = 1 if to_pos.col > from_pos.col else -1
        rook_from_col, rook_to_col = _CASTLING_ROOK_COLS[step]
        rook_from = Position(from_pos.row, rook_from_col)
        rook_to = Position(from_pos.row, rook_to_col)
        rook = slots[rook_from.index]
        # Only relocate onto an empty square so no two pieces ever share one.
        if (
            rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == piece.color
            and slots[rook_to.index] is None
        ):
            slots[rook_from.index] = None
            slots[rook_to.index] = rook.moved_to(rook_to)

    slots[from_pos.index] = None
    slots[to_pos.index] = piece.moved_to(to_pos)

    record = Move(
        from_pos=from_pos,
        to_pos=to_pos,
        piece=piece,
        captured_piece=captured,
        is_castling=is_castling,
    )
    next_turn = board.current_turn.opposite
    moved = Board(
        squares=tuple(slots),
        current_turn=next_turn,
        captured_pieces=captured_pieces,
        move_history=board.move_history + (record,),
    )

    gen = MoveGenerator(moved)
    if not gen.is_in_check(next_turn):
        return moved
    return replace(
        moved,
        is_check=True,
        is_checkmate=not gen.has_legal_move(next_turn),
    )


def select_piece(
    board: Board,
    pos: Position,
    policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
) -> Board:
    """Select the piece on *pos* and cache its legal destinations.

    Empty squares and pieces of the side not to move clear the selection.
    """
    piece = board[pos]
    if piece is None or piece.color != board.current_turn:
        return replace(board, selected_piece=None, valid_moves=())
    valid = MoveGenerator(board).legal_moves_for(piece, policy)
    return replace(board, selected_piece=piece, valid_moves=tuple(valid))


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Queries default to the side to move. Only checkmate ends a game:
    stalemate and the draw rules are not detected.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color | None = None) -> bool:
        side = board.current_turn if color is None else color
        return MoveGenerator(board).is_in_check(side)

    @staticmethod
    def is_checkmate(board: Board, color: Color | None = None) -> bool:
        side = board.current_turn if color is None else color
        return MoveGenerator(board).is_checkmate(side)

    @staticmethod
    def legal_moves(
        board: Board,
        pos: Position,
        policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
    ) -> list[Position]:
        """Legal destinations of the piece on *pos* (empty if none)."""
        piece = board[pos]
        if piece is None:
            return []
        return MoveGenerator(board).legal_moves_for(piece, policy)

    @staticmethod
    def all_legal_moves(
        board: Board,
        color: Color | None = None,
        policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
    ) -> list[tuple[Position, Position]]:
        """Every legal ``(from, to)`` pair for *color*."""
        side = board.current_turn if color is None else color
        gen = MoveGenerator(board)
        return [
            (piece.position, to_pos)
            for piece in board.pieces_of(side)
            for to_pos in gen.legal_moves_for(piece, policy)
        ]

    @staticmethod
    def is_legal_move(
        board: Board,
        from_pos: Position,
        to_pos: Position,
        policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
    ) -> bool:
        piece = board[from_pos]
        if piece is None or piece.color != board.current_turn:
            return False
        return to_pos in MoveGenerator(board).legal_moves_for(piece, policy)

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result."""
        if not Rules.is_checkmate(board):
            return GameResult.IN_PROGRESS
        return (
            GameResult.BLACK_WINS
            if board.current_turn == Color.WHITE
            else GameResult.WHITE_WINS
        )
