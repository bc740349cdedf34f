"""The chess pieces and the moves each can make."""

from __future__ import annotations

from chesskit.board import (
    BLACK_HOME_RANK,
    MAX_DIAG_DISTANCE,
    WHITE_HOME_RANK,
    Move,
    OffBoardError,
    Square,
)
from chesskit.domain import Colour, Piece

BISHOP_VALUE = 3
KNIGHT_VALUE = 3
PAWN_VALUE = 1

_DIAGONALS = ((1, 1), (-1, 1), (1, -1), (-1, -1))

_KNIGHT_JUMPS = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)


class Bishop(Piece):
    """A bishop, moving any distance along diagonals."""

    def moves(self, origin: Square) -> list[Move]:
        return [
            move
            for right, up in _DIAGONALS
            for move in _explore_diagonal(origin, right, up)
        ]

    def value(self) -> int:
        return BISHOP_VALUE


def _explore_diagonal(origin: Square, right: int, up: int):
    """Yield moves along one diagonal until the edge of the board."""
    explored: list[Square] = []
    for distance in range(1, MAX_DIAG_DISTANCE + 1):
        try:
            target = origin.translate(right * distance, up * distance)
        except OffBoardError:
            return
        yield Move(origin, target, tuple(explored))
        explored.append(target)


class Knight(Piece):
    """A knight, jumping in L shapes."""

    def moves(self, origin: Square) -> list[Move]:
        moves = []
        for right, up in _KNIGHT_JUMPS:
            try:
                target = origin.translate(right, up)
            except OffBoardError:
                continue
            moves.append(Move(origin, target))
        return moves

    def value(self) -> int:
        return KNIGHT_VALUE


class Pawn(Piece):
    """A pawn, advancing towards the opponent and capturing diagonally."""

    def moves(self, origin: Square) -> list[Move]:
        if self.colour() is Colour.WHITE:
            advance = origin.up
            at_home = origin.rank == WHITE_HOME_RANK
        else:
            advance = origin.down
            at_home = origin.rank == BLACK_HOME_RANK

        try:
            one = advance(1)
        except OffBoardError:
            return []

        moves = [Move(origin, one, (one,))]

        if at_home:
            try:
                two = advance(2)
            except OffBoardError:
                pass
            else:
                moves.append(Move(origin, two, (one, two)))

        for sideways in (one.left, one.right):
            try:
                target = sideways(1)
            except OffBoardError:
                continue
            moves.append(Move(origin, target, capture_required=True))

        return moves

    def value(self) -> int:
        return PAWN_VALUE