"""GameEngine — rule-enforcing owner of one match's board and turn state.

All mutation of a match goes through :meth:`GameEngine.select` and
:meth:`GameEngine.make_move`; both return error values instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.move_generator import (
    can_capture,
    capture_path,
    has_any_capture,
    is_valid_move,
    legal_destinations,
    pieces_with_capture,
)
from checkie.core.rules import Rules
from checkie.core.types import DEFAULT_SIZE, Position, midpoint
from checkie.game.history import MoveHistory
from checkie.game.interfaces import GameError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :meth:`GameEngine.make_move`."""

    error: GameError | None = None
    continues: bool = False
    move: Move | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: GameError) -> MoveOutcome:
        return cls(error=error)


class GameEngine:
    """Orchestrates a single match: selection, move application, turn order.

    Thread-safety: none. Every call runs to completion against the owned
    board; callers serialise access.
    """

    __slots__ = (
        "_board",
        "_current_player",
        "_selected",
        "_in_capture_chain",
        "_is_game_over",
        "_winner",
        "_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        current_player: Color = Color.WHITE,
        history: MoveHistory | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._current_player = current_player
        self._selected: Position | None = None
        self._in_capture_chain = False
        self._is_game_over = False
        self._winner: Color | None = None
        self._history = history if history is not None else MoveHistory(self._board.size)

    def new_game(self, size: int = DEFAULT_SIZE) -> None:
        """Reset to the standard starting layout with White to move."""
        self._board = Board.initial(size)
        self._current_player = Color.WHITE
        self._selected = None
        self._in_capture_chain = False
        self._is_game_over = False
        self._winner = None
        self._history = MoveHistory(size)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Color:
        return self._current_player

    @property
    def selected(self) -> Position | None:
        return self._selected

    @property
    def in_capture_chain(self) -> bool:
        """A capture sequence was started and must be completed."""
        return self._in_capture_chain

    @property
    def is_game_over(self) -> bool:
        return self._is_game_over

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def history(self) -> MoveHistory:
        return self._history

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, row: int, col: int) -> GameError | None:
        """Select the piece on ``(row, col)``; selecting it again deselects."""
        if not self._board.in_bounds(row, col):
            return GameError.OUT_OF_BOUNDS

        if self._in_capture_chain:
            # The capturing piece stays selected until the chain is finished.
            if (row, col) == self._selected:
                return None
            return GameError.FORCED_CAPTURE_AVAILABLE

        if self._selected == (row, col):
            self._selected = None
            return None

        piece = self._board.get(row, col)
        if piece is None:
            return GameError.NO_PIECE_SELECTED
        if piece.color != self._current_player:
            return GameError.WRONG_PIECE_COLOR

        self._selected = (row, col)
        return None

    def validate_selection(self, row: int, col: int) -> GameError | None:
        """Check a selection against the mandatory-capture rule, without selecting.

        Unlike :meth:`select`, a piece that cannot capture is refused while
        another piece of the same color can.
        """
        if not self._board.in_bounds(row, col):
            return GameError.OUT_OF_BOUNDS
        piece = self._board.get(row, col)
        if piece is None:
            return GameError.NO_PIECE_SELECTED
        if piece.color != self._current_player:
            return GameError.WRONG_PIECE_COLOR
        if self._in_capture_chain and (row, col) != self._selected:
            return GameError.FORCED_CAPTURE_AVAILABLE
        if self.has_captures_available() and not can_capture(self._board, (row, col)):
            return GameError.FORCED_CAPTURE_AVAILABLE
        return None

    def cancel_selection(self) -> bool:
        """Drop the current selection. Refused while a capture chain is open."""
        if self._in_capture_chain:
            return False
        self._selected = None
        return True

    # ── Moves ────────────────────────────────────────────────────────────

    def make_move(self, to_row: int, to_col: int) -> MoveOutcome:
        """Move the selected piece to ``(to_row, to_col)``.

        The destination is either one diagonal step or jump, or the final
        square of a capture chain, in which case the whole chain is played.
        """
        if self._is_game_over:
            return MoveOutcome.failed(GameError.INVALID_MOVE)
        if self._selected is None:
            return MoveOutcome.failed(GameError.NO_PIECE_SELECTED)
        if not self._board.in_bounds(to_row, to_col):
            return MoveOutcome.failed(GameError.OUT_OF_BOUNDS)

        origin = self._selected
        destination = (to_row, to_col)
        piece = self._board[origin]
        if piece is None:
            return MoveOutcome.failed(GameError.NO_PIECE_SELECTED)

        row_diff = abs(to_row - origin[0])
        col_diff = abs(to_col - origin[1])

        path: list[Position] | None
        if is_valid_move(self._board, origin, destination, piece):
            path = [destination]
            is_capture = row_diff == 2
        else:
            path = capture_path(self._board, origin, destination)
            is_capture = path is not None or (row_diff == 2 and col_diff == 2)

        if not is_capture and self.has_captures_available():
            return MoveOutcome.failed(GameError.FORCED_CAPTURE_AVAILABLE)
        if path is None:
            return MoveOutcome.failed(GameError.INVALID_MOVE)

        move = self._apply_path(origin, path)
        continues = move.is_capture and can_capture(self._board, move.destination)

        if continues:
            self._selected = move.destination
            self._in_capture_chain = True
        else:
            self._selected = None
            self._in_capture_chain = False
            self.switch_player()
            self._update_game_over()

        _LOGGER.debug("%s played %s (continues=%s)", move.player, move, continues)
        return MoveOutcome(continues=continues, move=move)

    def _apply_path(self, origin: Position, path: list[Position]) -> Move:
        board = self._board
        captured: list[Position] = []
        became_king = False
        current = origin

        for landing in path:
            if abs(landing[0] - current[0]) == 2:
                jumped = midpoint(current, landing)
                board.set(*jumped, None)
                captured.append(jumped)
            board.move(current, landing)
            current = landing

            piece = board[current]
            if piece is not None and Rules.should_promote(piece, current[0], board.size):
                board.set(*current, piece.promoted())
                became_king = True

        return self._history.record(
            origin,
            current,
            self._current_player,
            tuple(captured),
            became_king,
        )

    def switch_player(self) -> None:
        self._current_player = self._current_player.opposite

    def declare_winner(self, winner: Color | None) -> None:
        """End the match immediately (e.g. the remote side forfeits)."""
        self._selected = None
        self._in_capture_chain = False
        self._is_game_over = True
        self._winner = winner

    def _update_game_over(self) -> None:
        winner = Rules.game_winner(self._board, self._current_player)
        if winner is not None:
            self.declare_winner(winner)

    # ── Queries ──────────────────────────────────────────────────────────

    def check_winner(self) -> Color | None:
        return Rules.winner(self._board)

    def is_stalemate(self) -> bool:
        return Rules.is_stalemate(self._board, self._current_player)

    def has_captures_available(self) -> bool:
        return has_any_capture(self._board, self._current_player)

    def pieces_with_captures(self) -> set[Position]:
        return pieces_with_capture(self._board, self._current_player)

    def legal_destinations(self, row: int, col: int) -> set[Position]:
        if not self._board.in_bounds(row, col):
            return set()
        return legal_destinations(self._board, (row, col))
