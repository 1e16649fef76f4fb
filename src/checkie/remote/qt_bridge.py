"""Qt bridge to run a move advisor in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.game.history import MoveHistory
from checkie.remote.advisor import IMoveAdvisor, SimpleAdvisor
from checkie.remote.errors import AdvisorError, RequestFailed

_LOGGER = logging.getLogger(__name__)


class AdvisorWorker(QObject):
    """Thread-affine worker that asks an advisor for moves and hints.

    Every result is tagged with the request id it answers so the receiver can
    drop stale replies. Failures are emitted as :class:`AdvisorError` objects.
    """

    move_ready = pyqtSignal(int, object)
    move_failed = pyqtSignal(int, object)
    hint_ready = pyqtSignal(int, str)
    hint_failed = pyqtSignal(int, object)

    __slots__ = ("_advisor",)

    def __init__(self, advisor: IMoveAdvisor | None = None) -> None:
        super().__init__()
        self._advisor: IMoveAdvisor = advisor if advisor is not None else SimpleAdvisor()

    @pyqtSlot(object, object, object, int)
    def request_move(
        self, board: object, color: object, history: object, request_id: int
    ) -> None:
        """Ask the advisor for a move and emit ``move_ready`` or ``move_failed``."""
        if (
            not isinstance(board, Board)
            or not isinstance(history, MoveHistory)
            or color not in (Color.WHITE, Color.BLACK)
        ):
            self.move_failed.emit(request_id, RequestFailed("invalid move request"))
            return

        try:
            suggestion = self._advisor.suggest_move(board, Color(color), history)
        except AdvisorError as exc:
            _LOGGER.warning("Move request %d failed: %s", request_id, exc)
            self.move_failed.emit(request_id, exc)
            return
        except Exception as exc:
            _LOGGER.warning("Move request %d raised %r", request_id, exc)
            self.move_failed.emit(request_id, RequestFailed(str(exc)))
            return

        self.move_ready.emit(request_id, suggestion)

    @pyqtSlot(object, object, object, int)
    def request_hint(
        self, board: object, color: object, history: object, request_id: int
    ) -> None:
        """Ask the advisor for a hint and emit ``hint_ready`` or ``hint_failed``."""
        if (
            not isinstance(board, Board)
            or not isinstance(history, MoveHistory)
            or color not in (Color.WHITE, Color.BLACK)
        ):
            self.hint_failed.emit(request_id, RequestFailed("invalid hint request"))
            return

        try:
            text = self._advisor.hint(board, Color(color), history)
        except AdvisorError as exc:
            _LOGGER.warning("Hint request %d failed: %s", request_id, exc)
            self.hint_failed.emit(request_id, exc)
            return
        except Exception as exc:
            _LOGGER.warning("Hint request %d raised %r", request_id, exc)
            self.hint_failed.emit(request_id, RequestFailed(str(exc)))
            return

        self.hint_ready.emit(request_id, text)

    @pyqtSlot(object)
    def set_advisor(self, advisor: object) -> None:
        """Swap the advisor (takes effect on the next request)."""
        self._advisor = advisor  # type: ignore[assignment]

