from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .board import Board, Color, Piece
from .coord import Coord
from .move import Move

# Every square a pawn could conceivably reach in one move: the 8-neighbourhood
# plus the two double-step squares.
_NEIGHBOURHOOD = [
    (df, dr)
    for dr in (-1, 0, 1)
    for df in (-1, 0, 1)
    if (df, dr) != (0, 0)
] + [(0, -2), (0, 2)]


class RejectReason(Enum):
    WRONG_COLOR_AT_SOURCE = "wrong-color-at-source"
    ILLEGAL_MOVE = "geometry-or-occupancy-violation"


@dataclass(frozen=True)
class Applied:
    move: Move
    en_passant: bool = False


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    message: str


MoveResult = Union[Applied, Rejected]


def _is_en_passant(board: Board, move: Move) -> bool:
    last = board.last_move
    return last.is_two_step and last.dst.file == move.dst.file and move.is_en_passant_shape


def is_legal(board: Board, move: Move) -> bool:
    """
    Decides whether `move` is a legal pawn move on `board`, for whichever side owns
    the pawn at the source square. Never raises and never mutates the board.
    """
    if not move.is_in_area or not move.is_in_board:
        return False
    src_piece = board.at(move.src)
    dst_piece = board.at(move.dst)
    if src_piece is Piece.EMPTY:
        return False
    if src_piece.direction != move.vertical_sign:
        return False
    if move.is_two_step and src_piece.has_moved(move.src.rank):
        return False

    if move.is_straight:
        # Pawns never capture straight ahead.
        if move.is_one_step:
            return dst_piece is Piece.EMPTY
        between = move.src.offset(0, move.vertical_sign)
        return dst_piece is Piece.EMPTY and board.at(between) is Piece.EMPTY

    if move.is_diagonal:
        if dst_piece.direction == -src_piece.direction:
            return True
        return _is_en_passant(board, move)

    return False


def apply_if_legal(board: Board, move: Move, color: Color) -> MoveResult:
    """
    Applies `move` for the side `color` if it is legal, mutating `board` in place.

    The colour check runs first, then full legality; nothing is written to the
    board until both have passed.
    """
    src_piece = board.at(move.src) if move.src.on_board else Piece.EMPTY
    if src_piece.color is not color:
        return Rejected(RejectReason.WRONG_COLOR_AT_SOURCE, f"No {color.value} pawn at {move.src}")
    if not is_legal(board, move):
        return Rejected(RejectReason.ILLEGAL_MOVE, "Invalid Input")

    en_passant = _is_en_passant(board, move)
    board.put(move.dst, src_piece)
    board.put(move.src, Piece.EMPTY)
    if en_passant:
        # The captured pawn sits on the square the previous double step landed on.
        board.put(board.last_move.dst, Piece.EMPTY)
    board.last_move = move
    return Applied(move, en_passant=en_passant)


def candidate_destinations(coord: Coord) -> List[Coord]:
    """Squares worth testing from `coord`; may include off-board squares, which is_legal rejects."""
    return [coord.offset(df, dr) for df, dr in _NEIGHBOURHOOD]


def legal_moves_from(board: Board, coord: Coord) -> List[Move]:
    """All legal moves for the pawn on `coord`, sorted by notation."""
    moves = [Move(coord, dst) for dst in candidate_destinations(coord)]
    return sorted((m for m in moves if is_legal(board, m)), key=lambda m: m.notation)


def has_legal_move(board: Board, color: Color) -> bool:
    """True if any pawn of `color` has at least one legal move."""
    for coord in board.squares_of(color):
        for dst in candidate_destinations(coord):
            if is_legal(board, Move(coord, dst)):
                return True
    return False
