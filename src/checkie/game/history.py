"""Append-only log of applied moves."""

from __future__ import annotations

from collections.abc import Iterator

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.notation import move_to_notation, parse_move
from checkie.core.types import DEFAULT_SIZE


class MoveHistory:
    """Ordered record of every completed turn segment of one match."""

    __slots__ = ("_moves", "_size")

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self._moves: list[Move] = []
        self._size = size

    def append(self, move: Move) -> None:
        self._moves.append(move)

    def record(
        self,
        origin: tuple[int, int],
        destination: tuple[int, int],
        player: Color,
        captured: tuple[tuple[int, int], ...] = (),
        became_king: bool = False,
    ) -> Move:
        """Build, append and return a :class:`Move`."""
        move = Move(origin, destination, captured, became_king, player)
        self.append(move)
        return move

    def last(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def clear(self) -> None:
        self._moves.clear()

    def copy(self) -> MoveHistory:
        """Snapshot that later appends to this history do not touch."""
        clone = MoveHistory(self._size)
        clone._moves = list(self._moves)
        return clone

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]

    # ── Notation ─────────────────────────────────────────────────────────

    def notations(self) -> list[str]:
        return [move_to_notation(m, self._size) for m in self._moves]

    def to_notation(self) -> str:
        """Numbered listing, e.g. ``1. c3-d4 2. f6-e5``."""
        return " ".join(f"{i}. {text}" for i, text in enumerate(self.notations(), 1))

    @classmethod
    def from_notations(
        cls,
        entries: list[tuple[str, Color]],
        size: int = DEFAULT_SIZE,
    ) -> MoveHistory:
        """Rebuild a history from ``(notation, player)`` pairs."""
        history = cls(size)
        for text, player in entries:
            history.append(parse_move(text, player, size))
        return history
