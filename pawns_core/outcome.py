from __future__ import annotations

from enum import Enum
from typing import Optional

from .board import Board, Color, Piece
from .rules import has_legal_move


class GameOutcome(Enum):
    WHITE_WINS = "white_wins"
    BLACK_WINS = "black_wins"
    STALEMATE = "stalemate"
    IN_PROGRESS = "in_progress"

    @property
    def winner(self) -> Optional[Color]:
        if self is GameOutcome.WHITE_WINS:
            return Color.WHITE
        if self is GameOutcome.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def is_over(self) -> bool:
        return self is not GameOutcome.IN_PROGRESS

    @property
    def message(self) -> str:
        if self is GameOutcome.STALEMATE:
            return "Stalemate!"
        winner = self.winner
        if winner is not None:
            return f"{winner.title} Wins!"
        return ""


def win_for(piece: Piece) -> GameOutcome:
    """Outcome in favour of the owner of `piece`. Passing an empty square is a caller bug."""
    color = piece.color
    assert color is not None, "an empty square cannot win"
    return GameOutcome.WHITE_WINS if color is Color.WHITE else GameOutcome.BLACK_WINS


def classify(board: Board) -> GameOutcome:
    """
    Determines whether the game on `board` is over.

    Checks run in a fixed order and the first match wins: a pawn on its far
    rank, then a side with no pawns left, then White without a legal move,
    then Black without a legal move.
    """
    if board.rank_has(Color.BLACK.far_rank, Color.BLACK):
        return win_for(Piece.BLACK)
    if board.rank_has(Color.WHITE.far_rank, Color.WHITE):
        return win_for(Piece.WHITE)

    if board.count(Color.BLACK) == 0:
        return GameOutcome.WHITE_WINS
    if board.count(Color.WHITE) == 0:
        return GameOutcome.BLACK_WINS

    if not has_legal_move(board, Color.WHITE):
        return GameOutcome.STALEMATE
    if not has_legal_move(board, Color.BLACK):
        return GameOutcome.STALEMATE

    return GameOutcome.IN_PROGRESS
