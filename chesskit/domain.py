"""Core chess abstractions shared by the board and the pieces."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesskit.board import Move, Square

File = int
"""A vertical file on the board, 1 (a) to 8 (h)."""

Rank = int
"""A horizontal rank on the board, 1 to 8."""

Value = int
"""The relative value of a piece."""


class Colour(enum.Enum):
    """The colour of a piece."""

    WHITE = 1
    BLACK = 0

    def __str__(self) -> str:
        return self.name.lower()


class Piece(ABC):
    """Any piece that can stand on the board."""

    def __init__(self, colour: Colour) -> None:
        self._colour = colour

    @abstractmethod
    def moves(self, origin: Square) -> list[Move]:
        """Every move the piece could make from ``origin``, unvalidated."""

    @abstractmethod
    def value(self) -> Value:
        """The relative value of the piece."""

    def colour(self) -> Colour:
        """The colour of the piece."""
        return self._colour

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._colour is other._colour  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._colour))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._colour})"


class Board(ABC):
    """The board on which a game is played."""

    @abstractmethod
    def validate_move(self, move: Move) -> bool:
        """Whether ``move`` is valid given the rest of the board."""

    @abstractmethod
    def move_piece(self, move: Move) -> None:
        """Perform a move that has already been validated."""

    @abstractmethod
    def remove_piece(self, square: Square) -> None:
        """Take the piece on ``square`` off the board."""

    @abstractmethod
    def checks(self, colour: Colour) -> None:
        """Look for threats against the king of ``colour``."""