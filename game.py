from __future__ import annotations

# Facade module that re-exports the Pawns-Only Chess core.
# Used by the Flask app and tests; single-responsibility modules live under pawns_core/*.

from pawns_core.coord import Coord, FILES, SIZE
from pawns_core.move import Move, NULL_MOVE
from pawns_core.board import Board, Color, Piece
from pawns_core.rules import (
    Applied,
    MoveResult,
    RejectReason,
    Rejected,
    apply_if_legal,
    candidate_destinations,
    has_legal_move,
    is_legal,
    legal_moves_from,
)
from pawns_core.outcome import GameOutcome, classify, win_for
from pawns_core.action import (
    Action,
    ExitAction,
    InvalidAction,
    MoveAction,
    parse_action,
)
from pawns_core.state import GameSession, TurnReport


def main() -> None:
    # CLI driver delegated to pawns_core.cli
    from pawns_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
