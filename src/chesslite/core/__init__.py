"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesslite.core import apply_move, initial_board, legal_moves_for, parse_square

    board = initial_board()
    pawn = board.piece_at(parse_square("e2"))
    print(legal_moves_for(board, pawn))
    board = apply_move(board, parse_square("e2"), parse_square("e4"))
"""

from chesslite.core.board import Board, initial_board, piece_at
from chesslite.core.enums import CastlingPolicy, Color, GameResult, PieceType
from chesslite.core.move import Move
from chesslite.core.move_generator import (
    MoveGenerator,
    castling_moves_for,
    is_checkmate,
    is_in_check,
    legal_moves_for,
    moves_for,
)
from chesslite.core.notation import move_history_rows, move_to_notation
from chesslite.core.piece import Piece
from chesslite.core.rules import Rules, apply_move, select_piece
from chesslite.core.serialization import (
    SerializationError,
    board_from_dict,
    board_from_json,
    board_to_dict,
    board_to_json,
)
from chesslite.core.types import (
    BOARD_SIZE,
    Position,
    in_bounds,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "CastlingPolicy",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Engine operations
    "apply_move",
    "castling_moves_for",
    "initial_board",
    "is_checkmate",
    "is_in_check",
    "legal_moves_for",
    "moves_for",
    "piece_at",
    "select_piece",
    # Serialisation / notation
    "SerializationError",
    "board_from_dict",
    "board_from_json",
    "board_to_dict",
    "board_to_json",
    "move_history_rows",
    "move_to_notation",
]
