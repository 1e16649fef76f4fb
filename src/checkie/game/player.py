"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from checkie.core.enums import Color
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.game.history import MoveHistory


class HumanPlayer(IPlayer):
    """A human participant — moves come from input events.

    ``request_move`` never dispatches anything because humans pick moves
    interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board, history: MoveHistory) -> bool:
        return False  # Human moves arrive through the state machine

    def cancel(self) -> None:
        pass


class RemotePlayer(IPlayer):
    """A non-human participant whose moves come from a move advisor.

    The advisor call itself is decoupled: ``RemotePlayer`` only stores a
    *dispatcher* callable invoked on ``request_move``. In the Qt build this
    forwards the request to an ``AdvisorWorker`` living in a ``QThread``; the
    answer comes back to the state machine as an event. Without a dispatcher
    the state machine resolves the move synchronously.

    Args:
        color: Side the remote player controls.
        name: Display name.
        on_request_move: ``(Board, Color, MoveHistory) -> None`` — called when
            the state machine asks for a move.
        on_cancel: ``() -> None`` — called to abandon an outstanding request.
    """

    __slots__ = ("_color", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Opponent",
        on_request_move: Callable[[Board, Color, MoveHistory], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board, history: MoveHistory) -> bool:
        if self._on_request_move is None:
            return False
        self._on_request_move(board.copy(), self._color, history.copy())
        return True

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
