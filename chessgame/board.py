"""The 8x8 chess board and its starting position."""

from __future__ import annotations

from chessgame.pieces import (
    BOARD_SIZE,
    Bishop,
    Color,
    King,
    Knight,
    Pawn,
    Piece,
    Queen,
    Rook,
)

_PIECE_TYPES: dict[str, type[Piece]] = {
    "pawn": Pawn,
    "rook": Rook,
    "knight": Knight,
    "bishop": Bishop,
    "queen": Queen,
    "king": King,
}

_BACK_RANK = ("rook", "knight", "bishop", "queen", "king", "bishop", "knight", "rook")


class Board:
    """A grid of squares, each empty or holding one piece."""

    def __init__(self) -> None:
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.set_up_board()

    def _create_piece(self, name: str, color: Color) -> Piece | None:
        piece_type = _PIECE_TYPES.get(name)
        return piece_type(color, self) if piece_type is not None else None

    @staticmethod
    def _check(row: int, col: int) -> None:
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"square ({row}, {col}) is off the board")

    def set_up_board(self) -> None:
        """Place both sides' pieces on their starting rows."""
        for col, name in enumerate(_BACK_RANK):
            self._squares[0][col] = self._create_piece(name, Color.BLACK)
            self._squares[1][col] = self._create_piece("pawn", Color.BLACK)
        for col, name in enumerate(_BACK_RANK):
            self._squares[7][col] = self._create_piece(name, Color.WHITE)
            self._squares[6][col] = self._create_piece("pawn", Color.WHITE)

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Return the piece on (row, col), or None if the square is empty."""
        self._check(row, col)
        return self._squares[row][col]

    def move_piece(self, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        """Move whatever stands on the first square onto the second, leaving the first empty."""
        self._check(from_row, from_col)
        self._check(to_row, to_col)
        self._squares[to_row][to_col] = self._squares[from_row][from_col]
        self._squares[from_row][from_col] = None