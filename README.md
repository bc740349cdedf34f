# chesskit

Building blocks for a chess engine: squares on the board, candidate moves,
and the movement rules of the bishop, the knight and the pawn.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Squares

`chesskit.board.Square` is one of the 64 squares of the board, identified
by a `file` (1–8, shown as `a`–`h`) and a `rank` (1–8). It is an immutable,
hashable value. Building a square off the board raises
`chesskit.board.OffBoardError` (a `ValueError`), and so does translating a
square off the board.

```python
from chesskit.board import Square, square_named

e4 = square_named("e4")
print(e4)                    # e4
print(e4.translate(1, 1))    # f5
print(e4.up(2), e4.left(3))  # e6 b4
print(Square(3, 6))          # c6
```

`square_named` accepts names such as `"e4"` (case and surrounding spaces are
ignored) and raises `ValueError` for anything that is not a square name.

The module also holds the board's geometry: `MIN_FILE`, `MAX_FILE`,
`MIN_RANK`, `MAX_RANK`, `MAX_DIAG_DISTANCE`, `MAX_STRAIGHT_DISTANCE`,
`WHITE_HOME_RANK` (2) and `BLACK_HOME_RANK` (7).

## Moves

Pieces describe the moves they could make from a square, without knowing
what else is on the board. Each `chesskit.board.Move` records:

- `origin` and `target`, where it starts and where it ends,
- `nothing_blocking`, a tuple of squares that must be empty for the move to
  be legal,
- `capture_required`, whether the move is only legal as a capture.

## Pieces

`chesskit.domain.Colour` has the members `WHITE` and `BLACK`, shown as
`white` and `black`. Every piece is built with its colour and offers
`moves(origin)`, `value()` and `colour()`.

```python
from chesskit.board import square_named
from chesskit.domain import Colour
from chesskit.pieces import Knight, Pawn

knight = Knight(Colour.WHITE)
print(sorted(str(m.target) for m in knight.moves(square_named("a1"))))  # ['b3', 'c2']

pawn = Pawn(Colour.WHITE)
for move in pawn.moves(square_named("d2")):
    print(move.target, move.capture_required)
# d3 False
# d4 False
# c3 True
# e3 True
```

- `Bishop` (value 3) moves along the four diagonals to the edge of the
  board; each move lists the squares passed on the way in
  `nothing_blocking`.
- `Knight` (value 3) jumps in L shapes; nothing can block it.
- `Pawn` (value 1) advances one square, or two from its home rank, with the
  squares it advances through in `nothing_blocking`; it may also move one
  square diagonally forwards, as a capture only. A pawn on the far rank has
  no moves.

## Command line

```
chesskit
```

prints `Hello, world!` and exits; it takes no options besides `--help`.

## What it does not do

There is no board that holds pieces: `chesskit.domain.Board` is only an
abstract interface (`validate_move`, `move_piece`, `remove_piece`, `checks`)
with no implementation, so the package cannot decide whether a move is
legal in a position, make moves, or detect check. Rooks, queens and kings
are not provided, and there is no playable game, interactive or otherwise.