"""Per-piece move generation, check detection and the legal-move filter.

Layering: the raw generators (``moves_for``) know nothing about check.
``is_in_check`` only ever calls the raw generators. ``legal_moves_for``
sits on top of both and is never called from below, so no recursion can
form between the filter and the detector.
"""

from __future__ import annotations

from dataclasses import replace

from chesslite.core.board import Board, relocate
from chesslite.core.enums import CastlingPolicy, Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Position, in_bounds

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# King column before castling and (rook column, step) for each wing.
_KING_HOME_COL = 4
_CASTLING_WINGS: tuple[tuple[int, int], ...] = ((7, 1), (0, -1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Position, ...], ...]:
    targets: list[tuple[Position, ...]] = []
    for idx in range(BOARD_SIZE * BOARD_SIZE):
        row, col = divmod(idx, BOARD_SIZE)
        moves: list[Position] = []
        for dr, dc in offsets:
            if in_bounds(row + dr, col + dc):
                moves.append(Position(row + dr, col + dc))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Position, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Position, ...], ...]] = []
    for idx in range(BOARD_SIZE * BOARD_SIZE):
        row, col = divmod(idx, BOARD_SIZE)
        square_rays: list[tuple[Position, ...]] = []
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            ray: list[Position] = []
            while in_bounds(r, c):
                ray.append(Position(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)


class MoveGenerator:
    """Move generation and check queries over one :class:`Board` snapshot.

    The generator never modifies the board; simulations work on fresh
    :class:`Board` values.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Raw (geometric) generation ----------------------------------------

    def moves_for(self, piece: Piece) -> list[Position]:
        """Destinations reachable by *piece*, ignoring self-check."""
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._gen_pawn(piece)
        if pt == PieceType.ROOK:
            return self._gen_sliding(piece, _ROOK_RAYS[piece.position.index])
        if pt == PieceType.KNIGHT:
            return self._gen_step(piece, _KNIGHT_TARGETS[piece.position.index])
        if pt == PieceType.BISHOP:
            return self._gen_sliding(piece, _BISHOP_RAYS[piece.position.index])
        if pt == PieceType.QUEEN:
            idx = piece.position.index
            return self._gen_sliding(piece, _ROOK_RAYS[idx]) + self._gen_sliding(
                piece, _BISHOP_RAYS[idx]
            )
        return self._gen_step(piece, _KING_TARGETS[piece.position.index])

    # -- Check detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king on a square some enemy piece can move to?

        Returns ``False`` when *color* has no king.
        """
        king = self._board.king_of(color)
        if king is None:
            return False
        target = king.position
        for enemy in self._board.pieces_of(color.opposite):
            if target in self.moves_for(enemy):
                return True
        return False

    def is_square_attacked(self, pos: Position, by_color: Color) -> bool:
        """Is *pos* attacked by *by_color*, whether or not it is occupied?

        Pawns attack diagonally only; their forward pushes do not count.
        """
        for enemy in self._board.pieces_of(by_color):
            if enemy.piece_type == PieceType.PAWN:
                row = enemy.position.row + by_color.forward
                if row == pos.row and abs(enemy.position.col - pos.col) == 1:
                    return True
                continue
            if enemy.piece_type in (PieceType.KNIGHT, PieceType.KING):
                table = (
                    _KNIGHT_TARGETS
                    if enemy.piece_type == PieceType.KNIGHT
                    else _KING_TARGETS
                )
                if pos in table[enemy.position.index]:
                    return True
                continue
            if pos in self._slide_reach(enemy):
                return True
        return False

    # -- Legal-move filter -------------------------------------------------

    def legal_moves_for(
        self,
        piece: Piece,
        policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
    ) -> list[Position]:
        """Destinations that do not leave *piece*'s own king in check."""
        legal = [
            to_pos
            for to_pos in self.moves_for(piece)
            if not self.leaves_king_in_check(piece, to_pos)
        ]
        if policy == CastlingPolicy.FULLY_LEGAL and piece.piece_type == PieceType.KING:
            legal.extend(self.castling_moves_for(piece))
        return legal

    def leaves_king_in_check(self, piece: Piece, to_pos: Position) -> bool:
        """Simulate *piece* moving to *to_pos* and test its king."""
        simulated = replace(
            self._board,
            squares=relocate(self._board.squares, piece, to_pos),
        )
        return MoveGenerator(simulated).is_in_check(piece.color)

    def has_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves_for(p) for p in self._board.pieces_of(color))

    def is_checkmate(self, color: Color) -> bool:
        """In check with no legal move. Stalemate is never reported."""
        if not self.is_in_check(color):
            return False
        return not self.has_legal_move(color)

    # -- Castling (FULLY_LEGAL policy only) --------------------------------

    def castling_moves_for(self, king: Piece) -> list[Position]:
        """Two-column king destinations under full castling rules."""
        if king.piece_type != PieceType.KING or king.has_moved:
            return []
        home = king.position
        if home.col != _KING_HOME_COL or self.is_in_check(king.color):
            return []

        board = self._board
        opponent = king.color.opposite
        moves: list[Position] = []
        for rook_col, step in _CASTLING_WINGS:
            rook = board[Position(home.row, rook_col)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue
            lo, hi = sorted((home.col, rook_col))
            between = (Position(home.row, c) for c in range(lo + 1, hi))
            if any(not board.is_empty(pos) for pos in between):
                continue
            transit = Position(home.row, home.col + step)
            landing = Position(home.row, home.col + 2 * step)
            if self.is_square_attacked(transit, opponent):
                continue
            if self.is_square_attacked(landing, opponent):
                continue
            moves.append(landing)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece) -> list[Position]:
        board = self._board
        moves: list[Position] = []
        forward = piece.color.forward

        one_step = piece.position.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if not piece.has_moved:
                two_step = piece.position.offset(2 * forward, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for dc in (-1, 1):
            cap = piece.position.offset(forward, dc)
            if cap is None:
                continue
            target = board[cap]
            if target is not None and target.color != piece.color:
                moves.append(cap)
        return moves

    def _gen_step(
        self, piece: Piece, targets: tuple[Position, ...]
    ) -> list[Position]:
        board = self._board
        moves: list[Position] = []
        for to_pos in targets:
            target = board[to_pos]
            if target is None or target.color != piece.color:
                moves.append(to_pos)
        return moves

    def _gen_sliding(
        self,
        piece: Piece,
        rays: tuple[tuple[Position, ...], ...],
    ) -> list[Position]:
        board = self._board
        moves: list[Position] = []
        for ray in rays:
            for to_pos in ray:
                target = board[to_pos]
                if target is None:
                    moves.append(to_pos)
                    continue
                if target.color != piece.color:
                    moves.append(to_pos)
                break
        return moves

    def _slide_reach(self, piece: Piece) -> list[Position]:
        """Squares a slider sees, including the first blocker of any color."""
        idx = piece.position.index
        if piece.piece_type == PieceType.ROOK:
            rays = _ROOK_RAYS[idx]
        elif piece.piece_type == PieceType.BISHOP:
            rays = _BISHOP_RAYS[idx]
        else:
            rays = _ROOK_RAYS[idx] + _BISHOP_RAYS[idx]
        reach: list[Position] = []
        for ray in rays:
            for to_pos in ray:
                reach.append(to_pos)
                if not self._board.is_empty(to_pos):
                    break
        return reach


# -- Functional API ----------------------------------------------------------


def moves_for(board: Board, piece: Piece) -> list[Position]:
    return MoveGenerator(board).moves_for(piece)


def is_in_check(board: Board, color: Color) -> bool:
    return MoveGenerator(board).is_in_check(color)


def legal_moves_for(
    board: Board,
    piece: Piece,
    policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED,
) -> list[Position]:
    return MoveGenerator(board).legal_moves_for(piece, policy)


def is_checkmate(board: Board, color: Color) -> bool:
    return MoveGenerator(board).is_checkmate(color)


def castling_moves_for(board: Board, king: Piece) -> list[Position]:
    return MoveGenerator(board).castling_moves_for(king)
