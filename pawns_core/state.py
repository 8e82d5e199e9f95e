from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .action import ExitAction, InvalidAction, MoveAction, parse_action
from .board import Board, Color
from .outcome import GameOutcome, classify
from .rules import Applied, Rejected, apply_if_legal


@dataclass(frozen=True)
class TurnReport:
    """What one submitted line did: messages for the player, and whether the session ended."""
    messages: List[str]
    board_changed: bool = False
    finished: bool = False
    applied: Optional[Applied] = None
    rejected: Optional[Rejected] = None


@dataclass
class GameSession:
    """Mutable state of one game: the board, the two players and whose turn it is."""
    white_name: str = "White"
    black_name: str = "Black"
    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    exited: bool = False

    @property
    def outcome(self) -> GameOutcome:
        return classify(self.board)

    @property
    def finished(self) -> bool:
        return self.exited or self.outcome.is_over

    def player_name(self, color: Color) -> str:
        return self.white_name if color is Color.WHITE else self.black_name

    @property
    def current_name(self) -> str:
        return self.player_name(self.turn)

    def submit(self, line: str) -> TurnReport:
        """Runs one turn for the active player from a raw input line."""
        if self.finished:
            raise RuntimeError("game is already finished")
        action = parse_action(line)
        if isinstance(action, InvalidAction):
            return TurnReport(["Invalid Input"])
        if isinstance(action, ExitAction):
            self.exited = True
            return TurnReport(["Bye!"], finished=True)
        if isinstance(action, MoveAction):
            return self._play(action)
        raise TypeError(f"unexpected action {action!r}")

    def _play(self, action: MoveAction) -> TurnReport:
        result = apply_if_legal(self.board, action.move, self.turn)
        if isinstance(result, Rejected):
            return TurnReport([result.message], rejected=result)

        messages = [self.board.pretty()]
        outcome = self.outcome
        if outcome.is_over:
            messages += [outcome.message, "Bye!"]
            return TurnReport(messages, board_changed=True, finished=True, applied=result)
        self.turn = self.turn.opposite()
        return TurnReport(messages, board_changed=True, applied=result)
