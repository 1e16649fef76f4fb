"""Position type alias and coordinate helpers.

Board layout (row 0 at the top, Black's home side)::

    row 0  ->  rank 8
    ...
    row 7  ->  rank 1

Columns map to files ``a``..``h`` from left to right.
"""

from __future__ import annotations

from typing import TypeAlias

Position: TypeAlias = tuple[int, int]  # (row, col)

DEFAULT_SIZE = 8

DIAGONALS: tuple[Position, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def square_name(pos: Position, size: int = DEFAULT_SIZE) -> str:
    """Human-readable name, e.g. (7, 0) -> 'a1', (0, 7) -> 'h8'."""
    row, col = pos
    return chr(ord("a") + col) + str(size - row)


def parse_square(name: str, size: int = DEFAULT_SIZE) -> Position:
    """Parse a square name, e.g. 'a1' -> (7, 0)."""
    if len(name) < 2 or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    col = ord(name[0].lower()) - ord("a")
    rank = int(name[1:])
    if not (0 <= col < size and 1 <= rank <= size):
        raise ValueError(f"Invalid square name: {name!r}")
    return (size - rank, col)


def midpoint(origin: Position, destination: Position) -> Position:
    """Square jumped over by a two-step diagonal."""
    return ((origin[0] + destination[0]) // 2, (origin[1] + destination[1]) // 2)


def is_dark_square(pos: Position) -> bool:
    """Playable squares are the ones with an odd coordinate sum."""
    return (pos[0] + pos[1]) % 2 == 1
