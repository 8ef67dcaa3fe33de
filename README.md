# chessgame

A small model of a chess board. It has the standard starting position and
pieces of two colours. For each piece it can list the squares the piece can
move to from where it stands.

## Installation

```
pip install .
```

## Usage

```python
from chessgame.board import Board
from chessgame.pieces import Color

board = Board()                # set up in the standard starting position

knight = board.piece_at(7, 1)  # white knight on its home square
print(knight.color is Color.WHITE)        # True
print(knight.possible_moves(7, 1))        # [(5, 0), (5, 2)]

board.move_piece(6, 4, 4, 4)   # push the white king's pawn two squares
print(board.piece_at(6, 4))    # None
```

Rows and columns run from 0 to 7. Row 0 is Black's back rank and row 7 is
White's. White pawns therefore move towards lower row numbers, and black pawns
move towards higher ones.

## The board (`chessgame.board`)

- `Board()` creates an 8x8 board and calls `set_up_board()`.
- `Board.set_up_board()` puts fresh pieces on rows 0, 1, 6 and 7 in the
  standard order. It does not clear the middle rows, so a piece that was moved
  there stays where it is.
- `Board.piece_at(row, col)` returns the piece on a square, or `None` if the
  square is empty.
- `Board.move_piece(from_row, from_col, to_row, to_col)` moves whatever stands
  on the first square onto the second. Anything already on the second square
  is replaced, and the first square is left empty. The move is not checked
  against any rules.

`piece_at` and `move_piece` raise `IndexError` for a square off the board.

## The pieces (`chessgame.pieces`)

`Color` has the members `WHITE` and `BLACK`. Every `Piece` has a `color`, the
`board` it stands on, and a `symbol()` method. `symbol()` returns `"P"` for
every kind of piece.

`possible_moves(row, col)` returns a list of `(row, col)` squares:

- `Pawn` moves one square forward if that square is empty. From its starting
  row it can also move two squares, if both squares are empty. It captures one
  square diagonally forward.
- `Rook` slides along ranks and files.
- `Bishop` slides along diagonals.
- `Knight` jumps in an L shape.
- `King` steps one square in any direction.

A sliding piece stops at the first occupied square. It includes that square
only if it holds a piece of the other colour. Stepping pieces include a target
square if it is empty or holds a piece of the other colour.

`Queen` exists as a piece on the board, but it has no move rules: calling its
`possible_moves` raises `NotImplementedError`.

## What it does not do

The package is a board model only. It provides:

- no graphical board and no command to start a game;
- no play on turns;
- no check or checkmate detection;
- no castling, en passant or promotion;
- no queen moves.

## Running the tests

```
pip install .[test]
pytest
```