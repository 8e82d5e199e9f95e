from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence

from .coord import Coord, FILES, SIZE
from .move import Move, NULL_MOVE


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> 'Color':
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def direction(self) -> int:
        """White advances toward higher ranks, Black toward lower ones."""
        return 1 if self is Color.WHITE else -1

    @property
    def start_rank(self) -> int:
        return 1 if self is Color.WHITE else 6

    @property
    def far_rank(self) -> int:
        return 7 if self is Color.WHITE else 0

    @property
    def pawn(self) -> 'Piece':
        return Piece.WHITE if self is Color.WHITE else Piece.BLACK

    @property
    def title(self) -> str:
        return self.value.capitalize()


class Piece(Enum):
    """Contents of a square. The value is the symbol used when rendering the board."""
    EMPTY = " "
    WHITE = "W"
    BLACK = "B"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def color(self) -> Optional[Color]:
        if self is Piece.WHITE:
            return Color.WHITE
        if self is Piece.BLACK:
            return Color.BLACK
        return None

    @property
    def direction(self) -> int:
        color = self.color
        return color.direction if color is not None else 0

    def has_moved(self, rank: int) -> bool:
        """Whether a pawn standing on `rank` has left its starting rank (and so lost its double step)."""
        color = self.color
        if color is None:
            return False
        return rank != color.start_rank


def _initial_row(rank: int) -> List[Piece]:
    if rank == Color.WHITE.start_rank:
        return [Piece.WHITE] * SIZE
    if rank == Color.BLACK.start_rank:
        return [Piece.BLACK] * SIZE
    return [Piece.EMPTY] * SIZE


@dataclass
class Board:
    """The 8x8 grid plus the previous accepted move, which en passant depends on."""
    grid: List[List[Piece]]  # grid[rank][file], rank 0 first
    last_move: Move = field(default=NULL_MOVE)

    @classmethod
    def initial(cls) -> 'Board':
        return cls([_initial_row(r) for r in range(SIZE)])

    @classmethod
    def empty(cls) -> 'Board':
        return cls([[Piece.EMPTY] * SIZE for _ in range(SIZE)])

    @classmethod
    def from_rows(cls, rows: Sequence[str], last_move: Move = NULL_MOVE) -> 'Board':
        """
        Builds a board from 8 strings of 8 symbols ('W', 'B', ' ' or '.'), rank 8 first,
        so a literal in source reads the way the board is printed.
        """
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError("expected 8 rows of 8 cells")
        grid: List[List[Piece]] = []
        for row in reversed(rows):
            grid.append([Piece(' ' if ch == '.' else ch) for ch in row])
        return cls(grid, last_move)

    def at(self, coord: Coord) -> Piece:
        return self.grid[coord.rank][coord.file]

    def __getitem__(self, coord: Coord) -> Piece:
        return self.at(coord)

    def put(self, coord: Coord, piece: Piece) -> None:
        self.grid[coord.rank][coord.file] = piece

    def coords(self) -> Iterable[Coord]:
        """Iterates over all squares, rank by rank starting at a1."""
        for r in range(SIZE):
            for f in range(SIZE):
                yield Coord(f, r)

    def squares_of(self, color: Color) -> Iterator[Coord]:
        pawn = color.pawn
        return (c for c in self.coords() if self.at(c) is pawn)

    def count(self, color: Color) -> int:
        pawn = color.pawn
        return sum(row.count(pawn) for row in self.grid)

    def rank_has(self, rank: int, color: Color) -> bool:
        return color.pawn in self.grid[rank]

    def copy(self) -> 'Board':
        return Board([list(row) for row in self.grid], self.last_move)

    def rows(self) -> List[str]:
        """Symbol strings per rank, rank 8 first; the inverse of from_rows()."""
        return ["".join(p.symbol for p in row) for row in reversed(self.grid)]

    def pretty(self) -> str:
        """Generates the framed text board, rank 8 at the top and file letters underneath."""
        border = "  " + "+---" * SIZE + "+"
        lines: List[str] = [border]
        for r in reversed(range(SIZE)):
            cells = " | ".join(p.symbol for p in self.grid[r])
            lines.append(f"{r + 1} | {cells} |")
            lines.append(border)
        lines.append("    " + "   ".join(FILES))
        return "\n".join(lines)
