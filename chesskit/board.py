"""Squares, moves and board geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

MIN_FILE = 1
MAX_FILE = 8
MIN_RANK = 1
MAX_RANK = 8

MAX_DIAG_DISTANCE = 7
MAX_STRAIGHT_DISTANCE = 7

WHITE_HOME_RANK = 2
BLACK_HOME_RANK = 7

_FILE_LETTERS = "abcdefgh"


class OffBoardError(ValueError):
    """Raised when a square would lie outside the board."""


@dataclass(frozen=True)
class Square:
    """One of the 64 squares on the board."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not MIN_FILE <= self.file <= MAX_FILE:
            raise OffBoardError(
                f"Square constructed with File out of bounds ({self.file})"
            )
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise OffBoardError(
                f"Square constructed with Rank out of bounds ({self.rank})"
            )

    def translate(self, right: int, up: int) -> Square:
        """The square ``right`` files across and ``up`` ranks up from this one."""
        return Square(self.file + right, self.rank + up)

    def up(self, spaces: int) -> Square:
        return self.translate(0, spaces)

    def down(self, spaces: int) -> Square:
        return self.translate(0, -spaces)

    def left(self, spaces: int) -> Square:
        return self.translate(-spaces, 0)

    def right(self, spaces: int) -> Square:
        return self.translate(spaces, 0)

    def __str__(self) -> str:
        return f"{_FILE_LETTERS[self.file - 1]}{self.rank}"


def square_named(name: str) -> Square:
    """The square with algebraic name ``name``, such as ``"e4"``."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in _FILE_LETTERS or not text[1].isdigit():
        raise ValueError(f"not a square name: {name!r}")
    return Square(_FILE_LETTERS.index(text[0]) + 1, int(text[1]))


@dataclass(frozen=True)
class Move:
    """A move of one piece from ``origin`` to ``target``.

    Every square in ``nothing_blocking`` must be empty for the move to be
    valid, and ``capture_required`` demands a capture on ``target``.
    """

    origin: Square
    target: Square
    nothing_blocking: tuple[Square, ...] = field(default_factory=tuple)
    capture_required: bool = False

    def __post_init__(self) -> None:
        blocking: Iterable[Square] = self.nothing_blocking or ()
        object.__setattr__(self, "nothing_blocking", tuple(blocking))