"""Chess pieces and the squares each of them can move to."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Protocol

BOARD_SIZE = 8

Square = tuple[int, int]


class Color(Enum):
    """The side a piece belongs to."""

    WHITE = "white"
    BLACK = "black"


class BoardView(Protocol):
    """What a piece needs to know about the board it stands on."""

    def piece_at(self, row: int, col: int) -> Piece | None: ...


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Piece:
    """A piece of one colour standing on a board."""

    def __init__(self, color: Color, board: BoardView) -> None:
        self.color = color
        self.board = board

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name})"

    def symbol(self) -> str:
        """Return the one-character symbol of the piece."""
        return "P"

    def possible_moves(self, row: int, col: int) -> list[Square]:
        """Return the squares the piece standing at (row, col) can reach."""
        raise NotImplementedError(f"{type(self).__name__} defines no move rules")

    def _is_enemy(self, other: Piece | None) -> bool:
        return other is not None and other.color is not self.color

    def _slide(self, row: int, col: int, directions: Iterable[Square]) -> Iterator[Square]:
        """Walk each direction until the edge, a friend, or a captured enemy."""
        for d_row, d_col in directions:
            r, c = row + d_row, col + d_col
            while _on_board(r, c):
                target = self.board.piece_at(r, c)
                if target is None:
                    yield r, c
                else:
                    if self._is_enemy(target):
                        yield r, c
                    break
                r += d_row
                c += d_col

    def _step(self, row: int, col: int, offsets: Iterable[Square]) -> Iterator[Square]:
        """Yield the single-step targets that are empty or hold an enemy."""
        for d_row, d_col in offsets:
            r, c = row + d_row, col + d_col
            if _on_board(r, c):
                target = self.board.piece_at(r, c)
                if target is None or self._is_enemy(target):
                    yield r, c


class Pawn(Piece):
    """Moves forward one square, two from its start row, and captures diagonally."""

    def possible_moves(self, row: int, col: int) -> list[Square]:
        moves: list[Square] = []
        direction = -1 if self.color is Color.WHITE else 1
        next_row = row + direction

        if _on_board(next_row, col) and self.board.piece_at(next_row, col) is None:
            moves.append((next_row, col))
            start_row = 6 if self.color is Color.WHITE else 1
            two_step_row = row + 2 * direction
            if row == start_row and self.board.piece_at(two_step_row, col) is None:
                moves.append((two_step_row, col))

        for d_col in (-1, 1):
            new_col = col + d_col
            if _on_board(next_row, new_col) and self._is_enemy(
                self.board.piece_at(next_row, new_col)
            ):
                moves.append((next_row, new_col))

        return moves


class Rook(Piece):
    """Slides along ranks and files."""

    _DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))

    def possible_moves(self, row: int, col: int) -> list[Square]:
        return list(self._slide(row, col, self._DIRECTIONS))


class Knight(Piece):
    """Jumps in an L shape."""

    _OFFSETS = (
        (-2, -1), (-2, 1), (-1, -2), (-1, 2),
        (1, -2), (1, 2), (2, -1), (2, 1),
    )

    def possible_moves(self, row: int, col: int) -> list[Square]:
        return list(self._step(row, col, self._OFFSETS))


class Bishop(Piece):
    """Slides along diagonals."""

    _DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))

    def possible_moves(self, row: int, col: int) -> list[Square]:
        return list(self._slide(row, col, self._DIRECTIONS))


class King(Piece):
    """Steps one square in any direction."""

    _OFFSETS = (
        (-1, -1), (-1, 1), (1, -1), (1, 1),
        (1, 0), (0, 1), (-1, 0), (0, -1),
    )

    def possible_moves(self, row: int, col: int) -> list[Square]:
        return list(self._step(row, col, self._OFFSETS))


class Queen(Piece):
    """The queen; it carries no move rules of its own."""