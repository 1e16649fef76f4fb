"""Board - piece placement on a square grid."""

from __future__ import annotations

from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.types import DEFAULT_SIZE, Position, is_dark_square

_HOME_ROWS = 3


class Board:
    """Mutable ``size`` x ``size`` grid of optional pieces.

    Coordinates outside the grid never raise: reads return ``None`` and
    writes report ``False``.
    """

    __slots__ = ("size", "cells")

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.cells: list[list[Piece | None]] = [[None] * size for _ in range(size)]

    # -- Element access -----------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Piece | None:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def set(self, row: int, col: int, piece: Piece | None) -> bool:
        if not self.in_bounds(row, col):
            return False
        self.cells[row][col] = piece
        return True

    def move(self, origin: Position, destination: Position) -> bool:
        """Relocate a piece without any legality check."""
        if not self.in_bounds(*origin) or not self.in_bounds(*destination):
            return False
        piece = self.get(*origin)
        if piece is None:
            return False
        self.set(*destination, piece)
        self.set(*origin, None)
        return True

    def __getitem__(self, pos: Position) -> Piece | None:
        return self.get(*pos)

    def is_empty(self, pos: Position) -> bool:
        return self.get(*pos) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Position]:
        """Occupied squares in row-major order, optionally filtered by color."""
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if (piece := self.cells[row][col]) is not None
            and (color is None or piece.color == color)
        ]

    def count(self, color: Color | None = None) -> int:
        return len(self.pieces(color))

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board(self.size)
        b.cells = [row.copy() for row in self.cells]
        return b

    def clear(self) -> None:
        self.cells = [[None] * self.size for _ in range(self.size)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, size: int = DEFAULT_SIZE) -> Board:
        """Standard starting layout: three home rows per side on dark squares."""
        b = cls(size)
        home_rows = min(_HOME_ROWS, size // 2)
        for row in range(size):
            if row < home_rows:
                color = Color.BLACK
            elif row >= size - home_rows:
                color = Color.WHITE
            else:
                continue
            for col in range(size):
                if is_dark_square((row, col)):
                    b.cells[row][col] = Piece(color)
        return b

    @classmethod
    def from_pieces(
        cls, pieces: dict[Position, Piece], size: int = DEFAULT_SIZE
    ) -> Board:
        """Build a board holding exactly *pieces*."""
        b = cls(size)
        for (row, col), piece in pieces.items():
            if not b.set(row, col, piece):
                raise ValueError(f"Square {(row, col)} is outside a {size}x{size} board")
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(self.size):
            cells = [str(p) if p else "." for p in self.cells[row]]
            rows.append(f"{self.size - row} {' '.join(cells)}")
        files = " ".join(chr(ord("a") + c) for c in range(self.size))
        rows.append(f"  {files}")
        return "\n".join(rows)
