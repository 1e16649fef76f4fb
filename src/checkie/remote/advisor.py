"""Move advisor protocol and the built-in deterministic policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from checkie.core.move_generator import all_moves_for
from checkie.core.types import square_name
from checkie.remote.errors import NoPossibleMoves

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Color
    from checkie.core.types import Position
    from checkie.game.history import MoveHistory


@dataclass(slots=True, frozen=True)
class Suggestion:
    """A move proposed by an advisor: one step, one jump or a chain terminal."""

    origin: Position
    destination: Position


class IMoveAdvisor(Protocol):
    """Protocol for remote move/hint providers.

    Implementations raise :class:`~checkie.remote.errors.AdvisorError`
    subclasses on failure.
    """

    def suggest_move(
        self, board: Board, color: Color, history: MoveHistory
    ) -> Suggestion: ...

    def hint(self, board: Board, color: Color, history: MoveHistory) -> str: ...


class SimpleAdvisor:
    """Deterministic fallback: first capture in row-major order, else first step."""

    def suggest_move(
        self, board: Board, color: Color, history: MoveHistory
    ) -> Suggestion:
        del history
        moves = all_moves_for(board, color)
        if not moves:
            raise NoPossibleMoves()
        captures = [m for m in moves if m[2]]
        origin, destination, _ = (captures or moves)[0]
        return Suggestion(origin, destination)

    def hint(self, board: Board, color: Color, history: MoveHistory) -> str:
        suggestion = self.suggest_move(board, color, history)
        origin = square_name(suggestion.origin, board.size)
        destination = square_name(suggestion.destination, board.size)
        return f"Try moving {origin} to {destination}."
