"""Shared pytest fixtures and board builders used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import parse_square

_TYPES = {
    "P": PieceType.PAWN,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}


def piece(code: str, square: str, *, moved: bool = False) -> Piece:
    """``piece("wR", "a1")`` → white rook on a1."""
    color = Color.WHITE if code[0] == "w" else Color.BLACK
    return Piece(_TYPES[code[1]], color, parse_square(square), moved)


def board_of(*specs: str, turn: Color = Color.WHITE) -> Board:
    """Build a board from ``"wKe1"``-style specs."""
    return Board.from_pieces([piece(s[:2], s[2:]) for s in specs], turn)


@pytest.fixture
def initial() -> Board:
    return Board.initial()


@pytest.fixture(autouse=True)
def _debug_logging() -> Iterator[None]:
    """Let caplog see library debug records, then restore the default level."""
    logging.getLogger("chesslite").setLevel(logging.DEBUG)
    yield
    logging.getLogger("chesslite").setLevel(logging.NOTSET)
