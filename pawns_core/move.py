from __future__ import annotations

from dataclasses import dataclass

from .coord import Coord, SIZE


@dataclass(frozen=True)
class Move:
    """
    A candidate pawn move between two squares.

    Every property here is a fact about the geometry of the two coordinates
    only. Nothing in this class looks at a board; occupancy rules live in
    rules.py.
    """
    src: Coord
    dst: Coord

    @classmethod
    def parse(cls, text: str) -> 'Move':
        """Builds a Move from four-character notation such as 'e2e4'."""
        if len(text) != 4:
            raise ValueError(f"bad move: {text!r}")
        return cls(Coord.from_notation(text[:2]), Coord.from_notation(text[2:]))

    @property
    def is_in_board(self) -> bool:
        return all(0 <= v < SIZE for v in (self.src.file, self.src.rank, self.dst.file, self.dst.rank))

    @property
    def is_straight(self) -> bool:
        return self.src.file == self.dst.file

    @property
    def rank_delta(self) -> int:
        return abs(self.src.rank - self.dst.rank)

    @property
    def is_one_step(self) -> bool:
        return self.rank_delta == 1

    @property
    def is_two_step(self) -> bool:
        return self.rank_delta == 2

    @property
    def is_diagonal_left(self) -> bool:
        return self.dst.file == self.src.file - 1

    @property
    def is_diagonal_right(self) -> bool:
        return self.dst.file == self.src.file + 1

    @property
    def is_diagonal(self) -> bool:
        return (self.is_diagonal_left or self.is_diagonal_right) and self.is_one_step

    @property
    def is_whiteward(self) -> bool:
        return self.dst.rank > self.src.rank

    @property
    def is_blackward(self) -> bool:
        return self.dst.rank < self.src.rank

    @property
    def vertical_sign(self) -> int:
        return 1 if self.is_whiteward else -1

    @property
    def is_in_area(self) -> bool:
        """True when exactly one pawn shape matches: diagonal step, single advance or double advance."""
        return (
            (self.is_diagonal_left and self.is_one_step)
            ^ (self.is_diagonal_right and self.is_one_step)
            ^ (self.is_straight and self.is_one_step)
            ^ (self.is_straight and self.is_two_step)
        )

    @property
    def is_en_passant_shape(self) -> bool:
        # Diagonal landing on the capture rank: rank 3 for White (index 5), rank 6 for Black (index 2).
        return (
            (self.is_blackward and not self.is_straight and self.src.rank == 3 and self.dst.rank == 2)
            or (self.is_whiteward and not self.is_straight and self.src.rank == 4 and self.dst.rank == 5)
        )

    @property
    def notation(self) -> str:
        return f"{self.src.notation}{self.dst.notation}"

    def __str__(self) -> str:
        return self.notation


# Initial value of Board.last_move: not a double step, so en passant can never match it.
NULL_MOVE = Move(Coord(0, 0), Coord(0, 0))
