"""Tests for square names and move notation."""

import pytest

from chesslite.core.board import Board
from chesslite.core.notation import (
    CASTLE_KINGSIDE,
    CASTLE_QUEENSIDE,
    move_history_rows,
    move_to_notation,
)
from chesslite.core.rules import apply_move
from chesslite.core.types import Position, parse_square, square_name

from conftest import board_of


def _play(board: Board, *moves: str) -> Board:
    for mv in moves:
        board = apply_move(board, parse_square(mv[:2]), parse_square(mv[2:]))
    return board


class TestSquareNames:
    @pytest.mark.parametrize(
        ("name", "pos"),
        [
            ("a8", Position(0, 0)),
            ("h8", Position(0, 7)),
            ("a1", Position(7, 0)),
            ("e1", Position(7, 4)),
            ("e4", Position(4, 4)),
        ],
    )
    def test_names(self, name: str, pos: Position) -> None:
        assert square_name(pos) == name
        assert parse_square(name) == pos
        assert str(pos) == name

    @pytest.mark.parametrize("bad", ["", "e", "e9", "i1", "e0", "4e", "e10"])
    def test_invalid(self, bad: str) -> None:
        with pytest.raises(ValueError):
            parse_square(bad)

    def test_offset_off_board(self) -> None:
        assert parse_square("h1").offset(0, 1) is None
        assert parse_square("h1").offset(-1, 0) == parse_square("h2")


class TestMoveNotation:
    def test_pawn_move(self) -> None:
        board = _play(Board.initial(), "e2e4")
        assert move_to_notation(board.move_history[0]) == "e2e4"

    def test_piece_move(self) -> None:
        board = _play(Board.initial(), "g1f3")
        assert move_to_notation(board.move_history[0]) == "Ng1f3"

    def test_capture(self) -> None:
        board = _play(board_of("wKe1", "wRa1", "bRa8", "bKh7"), "a1a8")
        assert move_to_notation(board.move_history[0]) == "Ra1xa8"

    def test_pawn_capture(self) -> None:
        board = _play(Board.initial(), "e2e4", "d7d5", "e4d5")
        assert move_to_notation(board.move_history[2]) == "e4xd5"

    def test_castling(self) -> None:
        board = board_of("wKe1", "wRa1", "wRh1", "bKe8")
        kingside = _play(board, "e1g1").move_history[0]
        queenside = _play(board, "e1c1").move_history[0]
        assert move_to_notation(kingside) == CASTLE_KINGSIDE
        assert move_to_notation(queenside) == CASTLE_QUEENSIDE

    def test_move_str_is_coordinates(self) -> None:
        board = _play(Board.initial(), "g1f3")
        assert str(board.move_history[0]) == "g1f3"


class TestHistoryRows:
    def test_empty(self) -> None:
        assert move_history_rows(()) == []

    def test_pairs_and_pending_reply(self) -> None:
        board = _play(Board.initial(), "e2e4", "e7e5", "g1f3")
        assert move_history_rows(board.move_history) == [
            (1, "e2e4", "e7e5"),
            (2, "Ng1f3", ""),
        ]
