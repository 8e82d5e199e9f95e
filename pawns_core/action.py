from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .move import Move

_MOVE_RE = re.compile(r"[a-h][1-8][a-h][1-8]")
EXIT_TOKEN = "exit"


@dataclass(frozen=True)
class MoveAction:
    move: Move


@dataclass(frozen=True)
class ExitAction:
    pass


@dataclass(frozen=True)
class InvalidAction:
    text: str = ""


Action = Union[MoveAction, ExitAction, InvalidAction]


def parse_action(text: str) -> Action:
    """Turns one line of player input into an action. Matching is exact: no trimming, no case folding."""
    if _MOVE_RE.fullmatch(text):
        return MoveAction(Move.parse(text))
    if text == EXIT_TOKEN:
        return ExitAction()
    return InvalidAction(text)
