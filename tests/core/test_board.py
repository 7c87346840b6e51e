"""Tests for Board."""

import pytest

from chesslite.core.board import Board, initial_board, piece_at
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Position, parse_square

from conftest import board_of, piece

_BACK_RANK = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


class TestBoardInitial:
    def test_sixteen_pieces_per_side(self) -> None:
        board = Board.initial()
        assert len(board.pieces) == 32
        assert len(board.pieces_of(Color.WHITE)) == 16
        assert len(board.pieces_of(Color.BLACK)) == 16

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        for col, pt in enumerate(_BACK_RANK):
            p = board[Position(7, col)]
            assert p is not None
            assert (p.color, p.piece_type) == (Color.WHITE, pt), f"Mismatch at col {col}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        for col, pt in enumerate(_BACK_RANK):
            p = board[Position(0, col)]
            assert p is not None
            assert (p.color, p.piece_type) == (Color.BLACK, pt), f"Mismatch at col {col}"

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[Position(6, col)] == Piece(
                PieceType.PAWN, Color.WHITE, Position(6, col)
            )
            assert board[Position(1, col)] == Piece(
                PieceType.PAWN, Color.BLACK, Position(1, col)
            )

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board.is_empty(Position(row, col))

    def test_game_state_defaults(self) -> None:
        board = initial_board()
        assert board.current_turn == Color.WHITE
        assert not board.is_check
        assert not board.is_checkmate
        assert board.captured_pieces == ()
        assert board.move_history == ()
        assert board.selected_piece is None
        assert board.valid_moves == ()

    def test_no_piece_has_moved(self) -> None:
        assert not any(p.has_moved for p in Board.initial().pieces)

    def test_initial_boards_are_equal(self) -> None:
        assert Board.initial() == Board.initial()


class TestBoardQueries:
    def test_piece_at(self) -> None:
        board = Board.initial()
        king = piece_at(board, parse_square("e1"))
        assert king is not None
        assert king.piece_type == PieceType.KING
        assert king.color == Color.WHITE
        assert piece_at(board, parse_square("e4")) is None

    def test_piece_knows_its_square(self) -> None:
        board = Board.initial()
        for p in board.pieces:
            assert board[p.position] is p

    def test_king_of(self) -> None:
        board = board_of("wKe1", "bKe8")
        assert board.king_of(Color.BLACK) == piece("bK", "e8")

    def test_king_of_missing(self) -> None:
        board = board_of("wKe1")
        assert board.king_of(Color.BLACK) is None

    def test_off_board_square_is_empty(self) -> None:
        board = Board.initial()
        assert board.piece_at(Position(-1, 0)) is None
        assert board[Position(8, 0)] is None
        assert board.is_empty(Position(0, -1))
        assert piece_at(board, Position(7, 8)) is None

    def test_repr(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[-1] == "  a b c d e f g h"


class TestBoardConstruction:
    def test_from_pieces_rejects_shared_square(self) -> None:
        with pytest.raises(ValueError, match="Two pieces"):
            Board.from_pieces([piece("wK", "e1"), piece("bQ", "e1")])

    @pytest.mark.parametrize(
        "pos", [Position(-1, 0), Position(8, 0), Position(0, 8)]
    )
    def test_from_pieces_rejects_off_board(self, pos: Position) -> None:
        stray = Piece(PieceType.ROOK, Color.WHITE, pos)
        with pytest.raises(ValueError, match="off the board"):
            Board.from_pieces([piece("wK", "e1"), stray])

    def test_empty(self) -> None:
        board = Board.empty(Color.BLACK)
        assert board.pieces == ()
        assert board.current_turn == Color.BLACK

    def test_board_is_frozen(self) -> None:
        board = Board.initial()
        with pytest.raises(AttributeError):
            board.current_turn = Color.BLACK  # type: ignore[misc]


class TestPiece:
    def test_symbols(self) -> None:
        assert piece("wK", "e1").symbol == "♔"
        assert piece("bN", "g8").symbol == "♞"
        assert piece("bP", "a7").symbol == "♟"

    def test_letters(self) -> None:
        assert piece("wP", "e2").letter == ""
        assert piece("bQ", "d8").letter == "Q"

    def test_moved_to(self) -> None:
        start = piece("wN", "g1")
        moved = start.moved_to(parse_square("f3"))
        assert moved.position == parse_square("f3")
        assert moved.has_moved
        assert not start.has_moved
        assert str(moved) == "white knight on f3"
