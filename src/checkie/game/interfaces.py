"""Abstract interfaces and shared enums for the game layer.

Follows Dependency Inversion: the state machine depends on these ABCs, not on
concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Color

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.game.history import MoveHistory


# ── Turn phases ──────────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Kinds of turn-state-machine phases."""

    WELCOME = auto()
    PLAYING = auto()
    PIECE_SELECTED = auto()
    MULTI_CAPTURE = auto()
    REMOTE_TURN = auto()  # remote collaborator is choosing a move
    GAME_OVER = auto()


# ── Engine errors ────────────────────────────────────────────────────────────


class GameError(IntEnum):
    """Recoverable rule violations reported by :class:`GameEngine`.

    Returned as values; the engine state is left unchanged whenever one is
    reported.
    """

    OUT_OF_BOUNDS = auto()
    NO_PIECE_SELECTED = auto()
    WRONG_PIECE_COLOR = auto()
    INVALID_MOVE = auto()
    FORCED_CAPTURE_AVAILABLE = auto()

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[GameError, str] = {
    GameError.OUT_OF_BOUNDS: "Position out of bounds",
    GameError.NO_PIECE_SELECTED: "No piece at selected position",
    GameError.WRONG_PIECE_COLOR: "Selected piece belongs to the opponent",
    GameError.INVALID_MOVE: "Invalid move",
    GameError.FORCED_CAPTURE_AVAILABLE: "Forced capture available",
}


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or remote)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board, history: MoveHistory) -> bool:
        """Begin the move-selection process.

        Returns True when the request was dispatched and the move will arrive
        later as an event; False when the caller must resolve it itself.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an outstanding move request (no-op for humans)."""
