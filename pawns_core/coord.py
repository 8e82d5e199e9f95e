from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
SIZE = 8


@dataclass(frozen=True)
class Coord:
    """A board square as (file, rank), both 0-indexed. a1 is (0, 0), h8 is (7, 7)."""
    file: int
    rank: int

    @classmethod
    def from_notation(cls, text: str) -> 'Coord':
        """Builds a Coord from algebraic text such as 'e2'."""
        if len(text) != 2 or text[0] not in FILES or text[1] not in "12345678":
            raise ValueError(f"bad square: {text!r}")
        return cls(FILES.index(text[0]), int(text[1]) - 1)

    @property
    def on_board(self) -> bool:
        return 0 <= self.file < SIZE and 0 <= self.rank < SIZE

    @property
    def notation(self) -> str:
        return f"{chr(ord('a') + self.file)}{self.rank + 1}"

    def offset(self, df: int, dr: int) -> 'Coord':
        return Coord(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        return self.notation
