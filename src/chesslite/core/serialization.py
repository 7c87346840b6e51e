"""Plain-record (de)serialisation of :class:`Board` snapshots.

The record is JSON compatible and uses the camelCase keys of the stored
game documents::

    {
        "pieces": [{"type": "pawn", "color": "white",
                    "position": {"row": 6, "col": 4}, "hasMoved": false}, ...],
        "currentTurn": "white",
        "isCheck": false,
        "isCheckmate": false,
        "capturedPieces": [...],
        "moveHistory": [{"from": {...}, "to": {...}, "piece": {...},
                         "capturedPiece": {...}, "isCastling": true}, ...],
    }

Selection state is transient and never written.
"""

from __future__ import annotations

import json
from typing import Any

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move
from chesslite.core.piece import Piece
from chesslite.core.types import Position, in_bounds


class SerializationError(ValueError):
    """Raised when a stored record cannot be turned back into a board."""


# ── Encoding ─────────────────────────────────────────────────────────────────


def position_to_dict(pos: Position) -> dict[str, int]:
    return {"row": pos.row, "col": pos.col}


def piece_to_dict(piece: Piece) -> dict[str, Any]:
    return {
        "type": str(piece.piece_type),
        "color": str(piece.color),
        "position": position_to_dict(piece.position),
        "hasMoved": piece.has_moved,
    }


def move_to_dict(move: Move) -> dict[str, Any]:
    data: dict[str, Any] = {
        "from": position_to_dict(move.from_pos),
        "to": position_to_dict(move.to_pos),
        "piece": piece_to_dict(move.piece),
    }
    if move.captured_piece is not None:
        data["capturedPiece"] = piece_to_dict(move.captured_piece)
    if move.is_castling:
        data["isCastling"] = True
    return data


def board_to_dict(board: Board) -> dict[str, Any]:
    """Authoritative game state as a plain record."""
    return {
        "pieces": [piece_to_dict(p) for p in board.pieces],
        "currentTurn": str(board.current_turn),
        "isCheck": board.is_check,
        "isCheckmate": board.is_checkmate,
        "capturedPieces": [piece_to_dict(p) for p in board.captured_pieces],
        "moveHistory": [move_to_dict(m) for m in board.move_history],
    }


def board_to_json(board: Board) -> str:
    return json.dumps(board_to_dict(board), ensure_ascii=False)


# ── Decoding ─────────────────────────────────────────────────────────────────


def _flag(data: Any, key: str) -> bool:
    """Optional boolean field; anything but a JSON boolean is rejected."""
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise SerializationError(f"Invalid {key} flag: {value!r}")
    return value


def position_from_dict(data: Any) -> Position:
    try:
        row = data["row"]
        col = data["col"]
    except (KeyError, TypeError):
        raise SerializationError(f"Invalid position record: {data!r}") from None
    if not isinstance(row, int) or not isinstance(col, int) or not in_bounds(row, col):
        raise SerializationError(f"Position out of bounds: {data!r}")
    return Position(row, col)


def piece_from_dict(data: Any) -> Piece:
    try:
        piece_type = PieceType.parse(data["type"])
        color = Color.parse(data["color"])
        position = position_from_dict(data["position"])
    except (KeyError, TypeError, AttributeError):
        raise SerializationError(f"Invalid piece record: {data!r}") from None
    except SerializationError:
        raise
    except ValueError as exc:
        raise SerializationError(str(exc)) from exc
    return Piece(piece_type, color, position, _flag(data, "hasMoved"))


def move_from_dict(data: Any) -> Move:
    try:
        from_pos = position_from_dict(data["from"])
        to_pos = position_from_dict(data["to"])
        piece = piece_from_dict(data["piece"])
        captured_raw = data.get("capturedPiece")
        is_castling = _flag(data, "isCastling")
    except (KeyError, TypeError, AttributeError):
        raise SerializationError(f"Invalid move record: {data!r}") from None
    captured = piece_from_dict(captured_raw) if captured_raw is not None else None
    return Move(from_pos, to_pos, piece, captured, is_castling)


def board_from_dict(data: Any) -> Board:
    """Rebuild a board; selection state comes back empty."""
    try:
        pieces = [piece_from_dict(p) for p in data["pieces"]]
        current_turn = Color.parse(data["currentTurn"])
        captured = [piece_from_dict(p) for p in data.get("capturedPieces", [])]
        history = [move_from_dict(m) for m in data.get("moveHistory", [])]
        is_check = _flag(data, "isCheck")
        is_checkmate = _flag(data, "isCheckmate")
    except (KeyError, TypeError, AttributeError):
        raise SerializationError(f"Invalid board record: {data!r}") from None
    except SerializationError:
        raise
    except ValueError as exc:
        raise SerializationError(str(exc)) from exc

    try:
        return Board.from_pieces(
            pieces,
            current_turn,
            captured_pieces=captured,
            move_history=history,
            is_check=is_check,
            is_checkmate=is_checkmate,
        )
    except ValueError as exc:
        raise SerializationError(str(exc)) from exc


def board_from_json(text: str) -> Board:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid board JSON: {exc}") from exc
    return board_from_dict(data)
