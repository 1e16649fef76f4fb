"""Remote advisor session orchestration for the main thread."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from checkie.config import AppSettings
from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.game.history import MoveHistory
from checkie.game.player import RemotePlayer
from checkie.game.state import Event, HintReady, RemoteMoveFailed, RemoteMoveReady
from checkie.remote.advisor import IMoveAdvisor, Suggestion
from checkie.remote.errors import AdvisorError, AdvisorTimeout, RequestFailed
from checkie.remote.prompting import advisor_from_settings
from checkie.remote.qt_bridge import AdvisorWorker

_LOGGER = logging.getLogger(__name__)


class _RequestBus(QObject):
    """Signal bridge for issuing worker requests with queued delivery."""

    move_requested = pyqtSignal(object, object, object, int)
    hint_requested = pyqtSignal(object, object, object, int)
    advisor_changed = pyqtSignal(object)


class RemoteSession:
    """Owns the advisor worker thread and turns its replies into events.

    Replies are matched against the latest request id; anything older is
    dropped. A move request that is not answered within ``timeout_s``
    produces a :class:`RemoteMoveFailed` carrying :class:`AdvisorTimeout`.

    Args:
        on_event: Receives :class:`RemoteMoveReady`, :class:`RemoteMoveFailed`
            and :class:`HintReady` events, usually ``TurnStateMachine.handle``.
        advisor: Advisor run by the worker (built-in policy when omitted).
        timeout_s: Seconds to wait for a move before giving up.
        parent: Optional Qt parent for the thread and timer.
    """

    __slots__ = (
        "__weakref__",
        "_on_event",
        "_timeout_s",
        "_bus",
        "_thread",
        "_worker",
        "_timeout_timer",
        "_request_id",
        "_pending_move_request",
        "_pending_hint_request",
        "_is_started",
        "_is_shutting_down",
    )

    def __init__(
        self,
        on_event: Callable[[Event], object],
        *,
        advisor: IMoveAdvisor | None = None,
        timeout_s: float = 30.0,
        parent: QObject | None = None,
    ) -> None:
        self._on_event = on_event
        self._timeout_s = timeout_s
        self._bus = _RequestBus(parent)
        self._thread = QThread(parent)
        self._worker = AdvisorWorker(advisor)

        self._timeout_timer = QTimer(parent)
        self._timeout_timer.setSingleShot(True)
        self._timeout_timer.timeout.connect(self._on_timeout)

        self._request_id = 0
        self._pending_move_request: int | None = None
        self._pending_hint_request: int | None = None
        self._is_started = False
        self._is_shutting_down = False

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        on_event: Callable[[Event], object],
        *,
        complete: Callable[[str], str | None] | None = None,
        parent: QObject | None = None,
    ) -> RemoteSession:
        """Build a session whose advisor and timeout come from *settings*.

        Raises:
            NoApiKey: *complete* was given without an API key.
            NoModel: *complete* was given without a model name.
        """
        return cls(
            on_event,
            advisor=advisor_from_settings(settings, complete),
            timeout_s=settings.request_timeout_s,
            parent=parent,
        )

    @property
    def is_waiting(self) -> bool:
        """A move request is outstanding."""
        return self._pending_move_request is not None

    def setup(self) -> None:
        """Start the worker thread and connect callbacks."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._worker.moveToThread(self._thread)
        self._bus.move_requested.connect(self._worker.request_move)
        self._bus.hint_requested.connect(self._worker.request_hint)
        self._bus.advisor_changed.connect(self._worker.set_advisor)
        self._worker.move_ready.connect(self._on_move_ready)
        self._worker.move_failed.connect(self._on_move_failed)
        self._worker.hint_ready.connect(self._on_hint_ready)
        self._worker.hint_failed.connect(self._on_hint_failed)
        self._thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Drop pending requests and stop the worker thread."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self.cancel()
        self._pending_hint_request = None
        self._thread.quit()
        self._thread.wait(2000)
        self._is_started = False

    def set_advisor(self, advisor: IMoveAdvisor) -> None:
        """Swap the worker's advisor; requests already queued keep the old one."""
        if self._is_started:
            self._bus.advisor_changed.emit(advisor)
        else:
            self._worker.set_advisor(advisor)

    def create_remote_player(self, color: Color, name: str = "Opponent") -> RemotePlayer:
        """Create a remote player wired to this session."""
        return RemotePlayer(
            color,
            name,
            on_request_move=self.request_move,
            on_cancel=self.cancel,
        )

    def request_move(self, board: Board, color: Color, history: MoveHistory) -> None:
        if not self._is_started or self._is_shutting_down:
            return
        request_id = self._next_request_id()
        self._pending_move_request = request_id
        self._timeout_timer.start(int(self._timeout_s * 1000))
        self._bus.move_requested.emit(board.copy(), color, history.copy(), request_id)

    def request_hint(self, board: Board, color: Color, history: MoveHistory) -> None:
        if not self._is_started or self._is_shutting_down:
            return
        request_id = self._next_request_id()
        self._pending_hint_request = request_id
        self._bus.hint_requested.emit(board.copy(), color, history.copy(), request_id)

    def cancel(self) -> None:
        """Forget the outstanding move request; its reply will be ignored."""
        self._timeout_timer.stop()
        self._pending_move_request = None

    def _next_request_id(self) -> int:
        self._request_id += 1
        return self._request_id

    def _on_move_ready(self, request_id: int, suggestion: object) -> None:
        if self._is_shutting_down or request_id != self._pending_move_request:
            return
        self.cancel()
        if not isinstance(suggestion, Suggestion):
            self._on_event(RemoteMoveFailed(RequestFailed("advisor returned no move")))
            return
        self._on_event(RemoteMoveReady(suggestion.origin, suggestion.destination))

    def _on_move_failed(self, request_id: int, error: object) -> None:
        if self._is_shutting_down or request_id != self._pending_move_request:
            return
        self.cancel()
        if not isinstance(error, AdvisorError):
            error = RequestFailed(str(error))
        self._on_event(RemoteMoveFailed(error))

    def _on_timeout(self) -> None:
        if self._is_shutting_down or self._pending_move_request is None:
            return
        _LOGGER.warning("Move request %d timed out", self._pending_move_request)
        self._pending_move_request = None
        self._on_event(RemoteMoveFailed(AdvisorTimeout(self._timeout_s)))

    def _on_hint_ready(self, request_id: int, text: str) -> None:
        if self._is_shutting_down or request_id != self._pending_hint_request:
            return
        self._pending_hint_request = None
        self._on_event(HintReady(text))

    def _on_hint_failed(self, request_id: int, error: object) -> None:
        if self._is_shutting_down or request_id != self._pending_hint_request:
            return
        self._pending_hint_request = None
        _LOGGER.warning("Hint request %d failed: %s", request_id, error)
