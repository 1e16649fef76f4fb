"""Turn state machine — phases, input events and the transition function.

Phases and events are closed unions of small frozen dataclasses. A single
dispatch in :meth:`TurnStateMachine.handle` picks the handler for the current
phase; every board mutation is delegated to :class:`GameEngine`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import ClassVar, TypeAlias

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.types import Position
from checkie.game.history import MoveHistory
from checkie.game.interfaces import GameError, GamePhase
from checkie.game.session import GameSession
from checkie.remote.advisor import IMoveAdvisor, SimpleAdvisor, Suggestion
from checkie.remote.errors import AdvisorError, NoPossibleMoves

_LOGGER = logging.getLogger(__name__)

HintRequest = Callable[[Board, Color, MoveHistory], None]


# ── Phases ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Welcome:
    kind: ClassVar[GamePhase] = GamePhase.WELCOME


@dataclass(frozen=True, slots=True)
class Playing:
    kind: ClassVar[GamePhase] = GamePhase.PLAYING


@dataclass(frozen=True, slots=True)
class PieceSelected:
    position: Position
    kind: ClassVar[GamePhase] = GamePhase.PIECE_SELECTED


@dataclass(frozen=True, slots=True)
class MultiCapture:
    position: Position  # current square of the capturing piece
    kind: ClassVar[GamePhase] = GamePhase.MULTI_CAPTURE


@dataclass(frozen=True, slots=True)
class RemoteTurn:
    requested: bool = False
    kind: ClassVar[GamePhase] = GamePhase.REMOTE_TURN


@dataclass(frozen=True, slots=True)
class GameOver:
    winner: Color | None
    kind: ClassVar[GamePhase] = GamePhase.GAME_OVER


Phase: TypeAlias = Welcome | Playing | PieceSelected | MultiCapture | RemoteTurn | GameOver


# ── Events ───────────────────────────────────────────────────────────────────


class InputKey(IntEnum):
    """Discrete input delivered by the input source."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SELECT = auto()
    CANCEL = auto()
    QUIT = auto()


_CURSOR_DELTAS: dict[InputKey, Position] = {
    InputKey.UP: (-1, 0),
    InputKey.DOWN: (1, 0),
    InputKey.LEFT: (0, -1),
    InputKey.RIGHT: (0, 1),
}


@dataclass(frozen=True, slots=True)
class Key:
    key: InputKey


@dataclass(frozen=True, slots=True)
class RemoteMoveReady:
    origin: Position
    destination: Position


@dataclass(frozen=True, slots=True)
class RemoteMoveFailed:
    error: AdvisorError


@dataclass(frozen=True, slots=True)
class HintReady:
    text: str


Event: TypeAlias = Key | RemoteMoveReady | RemoteMoveFailed | HintReady


@dataclass(frozen=True, slots=True)
class Transition:
    """Phase after an event; ``exit`` asks the host loop to stop."""

    phase: Phase
    exit: bool = False


# ── View projection ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ViewData:
    """Read-only snapshot handed to a renderer after each transition."""

    phase: GamePhase
    board: Board
    current_player: Color
    cursor: Position
    selected: Position | None
    possible_moves: frozenset[Position]
    pieces_with_captures: frozenset[Position]
    status_message: str
    error_message: str | None
    show_remote_thinking: bool
    uses_builtin_policy: bool
    hint: str | None
    last_move: Move | None
    is_game_over: bool
    winner: Color | None


# ── State machine ────────────────────────────────────────────────────────────


class TurnStateMachine:
    """Drives one match from the welcome screen to game over.

    Args:
        session: Engine, players and UI state; a fresh human-vs-human session
            when omitted.
        advisor: Resolves remote moves synchronously when the remote player
            does not dispatch requests itself. Defaults to the built-in policy.
        fallback: Deterministic policy used when the advisor fails or proposes
            an illegal move.
        on_hint_request: Called after a remote move when hints are enabled;
            the answer comes back as a :class:`HintReady` event.
        initial: Starting phase (``Welcome`` by default).
    """

    __slots__ = ("session", "_advisor", "_fallback", "_on_hint_request", "_phase")

    def __init__(
        self,
        session: GameSession | None = None,
        *,
        advisor: IMoveAdvisor | None = None,
        fallback: IMoveAdvisor | None = None,
        on_hint_request: HintRequest | None = None,
        initial: Phase | None = None,
    ) -> None:
        self.session = session if session is not None else GameSession()
        self._fallback: IMoveAdvisor = fallback if fallback is not None else SimpleAdvisor()
        self._advisor: IMoveAdvisor = advisor if advisor is not None else self._fallback
        self._on_hint_request = on_hint_request
        self._phase: Phase = initial if initial is not None else Welcome()

    @property
    def phase(self) -> Phase:
        return self._phase

    # ── Entry point ──────────────────────────────────────────────────────

    def handle(self, event: Event) -> Transition:
        """Feed one event and return the resulting phase."""
        if isinstance(event, HintReady):
            if not isinstance(self._phase, GameOver):
                self.session.hint = event.text
            return Transition(self._phase)

        if isinstance(event, Key):
            self.session.error_message = None

        phase = self._phase
        if isinstance(phase, Welcome):
            transition = self._on_welcome(event)
        elif isinstance(phase, Playing):
            transition = self._on_playing(event)
        elif isinstance(phase, PieceSelected):
            transition = self._on_piece_selected(phase, event)
        elif isinstance(phase, MultiCapture):
            transition = self._on_multi_capture(phase, event)
        elif isinstance(phase, RemoteTurn):
            transition = self._on_remote_turn(phase, event)
        elif isinstance(phase, GameOver):
            transition = self._on_game_over(event)
        else:  # pragma: no cover - closed union
            raise TypeError(f"Unknown phase: {phase!r}")

        if not transition.exit and isinstance(transition.phase, Playing):
            transition = Transition(self._enter_playing())
        self._phase = transition.phase
        return transition

    def start(self) -> Transition:
        """Leave the welcome screen as if the player confirmed it."""
        return self.handle(Key(InputKey.SELECT))

    # ── Per-phase handlers ───────────────────────────────────────────────

    def _on_welcome(self, event: Event) -> Transition:
        if not isinstance(event, Key):
            return Transition(Welcome())
        if event.key == InputKey.QUIT:
            return Transition(Welcome(), exit=True)
        if event.key == InputKey.SELECT:
            return Transition(Playing())
        return Transition(Welcome())

    def _on_playing(self, event: Event) -> Transition:
        if not isinstance(event, Key):
            _LOGGER.debug("Ignoring %r while playing", event)
            return Transition(Playing())
        if self.session.is_remote_turn:
            return Transition(Playing())
        key = event.key
        if key == InputKey.QUIT:
            return Transition(Playing(), exit=True)
        if key in _CURSOR_DELTAS:
            self.session.move_cursor(*_CURSOR_DELTAS[key])
            return Transition(Playing())
        if key != InputKey.SELECT:
            return Transition(Playing())

        engine = self.session.engine
        cursor = self.session.cursor
        error = engine.validate_selection(*cursor)
        if error is None:
            error = engine.select(*cursor)
        if error is not None:
            self.session.error_message = error.message
            return Transition(Playing())
        return Transition(PieceSelected(cursor))

    def _on_piece_selected(self, phase: PieceSelected, event: Event) -> Transition:
        if not isinstance(event, Key):
            return Transition(phase)
        key = event.key
        engine = self.session.engine
        if key == InputKey.QUIT:
            return Transition(phase, exit=True)
        if key in _CURSOR_DELTAS:
            self.session.move_cursor(*_CURSOR_DELTAS[key])
            return Transition(phase)
        if key == InputKey.CANCEL:
            engine.cancel_selection()
            return Transition(Playing())
        if key != InputKey.SELECT:
            return Transition(phase)

        cursor = self.session.cursor
        if cursor == phase.position:
            engine.cancel_selection()
            return Transition(Playing())

        target = engine.board[cursor]
        if target is not None and target.color == engine.current_player:
            return self._reselect(phase, cursor)

        return self._play_human_move(phase, cursor)

    def _on_multi_capture(self, phase: MultiCapture, event: Event) -> Transition:
        if not isinstance(event, Key):
            return Transition(phase)
        key = event.key
        if key == InputKey.QUIT:
            return Transition(phase, exit=True)
        if key in _CURSOR_DELTAS:
            self.session.move_cursor(*_CURSOR_DELTAS[key])
            return Transition(phase)
        if key == InputKey.CANCEL:
            self.session.error_message = "You must continue capturing!"
            return Transition(phase)
        if key != InputKey.SELECT:
            return Transition(phase)

        cursor = self.session.cursor
        if cursor == phase.position:
            self.session.error_message = "You must continue capturing!"
            return Transition(phase)
        return self._play_human_move(phase, cursor)

    def _on_remote_turn(self, phase: RemoteTurn, event: Event) -> Transition:
        if isinstance(event, Key):
            if event.key == InputKey.QUIT:
                self.session.current_player.cancel()
                return Transition(phase, exit=True)
            return Transition(phase)
        if isinstance(event, RemoteMoveReady):
            return Transition(self._resolve_remote(Suggestion(event.origin, event.destination)))
        if isinstance(event, RemoteMoveFailed):
            return Transition(self._remote_failed(event.error))
        return Transition(phase)

    def _on_game_over(self, event: Event) -> Transition:
        phase = self._phase
        assert isinstance(phase, GameOver)
        if isinstance(event, Key):
            return Transition(phase, exit=True)
        return Transition(phase)

    # ── Human moves ──────────────────────────────────────────────────────

    def _reselect(self, phase: PieceSelected, cursor: Position) -> Transition:
        engine = self.session.engine
        error = engine.validate_selection(*cursor)
        if error is not None:
            self.session.error_message = error.message
            return Transition(phase)
        engine.cancel_selection()
        engine.select(*cursor)
        return Transition(PieceSelected(cursor))

    def _play_human_move(
        self, phase: PieceSelected | MultiCapture, cursor: Position
    ) -> Transition:
        outcome = self.session.engine.make_move(*cursor)
        if outcome.error is not None:
            self.session.error_message = outcome.error.message
            return Transition(phase)

        self.session.hint = None
        if outcome.continues:
            return Transition(MultiCapture(cursor))
        return Transition(self._after_turn())

    # ── Remote moves ─────────────────────────────────────────────────────

    def _enter_playing(self) -> Phase:
        """Hand the turn to the remote side when it is to move."""
        terminal = self._check_game_over()
        if terminal is not None:
            return terminal
        if not self.session.is_remote_turn:
            return Playing()

        session = self.session
        engine = session.engine
        session.remote.start_thinking()
        if session.current_player.request_move(engine.board, engine.history):
            return RemoteTurn(requested=True)

        try:
            suggestion = self._advisor.suggest_move(
                engine.board.copy(), engine.current_player, engine.history
            )
        except AdvisorError as exc:
            return self._remote_failed(exc)
        return self._resolve_remote(suggestion)

    def _resolve_remote(self, suggestion: Suggestion) -> Phase:
        error = self._play_suggestion(suggestion)
        if error is not None:
            _LOGGER.warning(
                "Remote move %s -> %s rejected: %s",
                suggestion.origin,
                suggestion.destination,
                error.message,
            )
            self.session.remote.set_error(f"Remote move rejected: {error.message}")
            return self._play_fallback()

        self.session.remote.stop_thinking()
        return self._after_remote_turn()

    def _remote_failed(self, error: AdvisorError) -> Phase:
        _LOGGER.warning("Remote advisor failed: %s", error)
        self.session.remote.set_error(f"Remote error: {error}")
        return self._play_fallback()

    def _play_fallback(self) -> Phase:
        engine = self.session.engine
        color = engine.current_player
        try:
            suggestion = self._fallback.suggest_move(
                engine.board.copy(), color, engine.history
            )
        except NoPossibleMoves:
            engine.declare_winner(color.opposite)
            return GameOver(color.opposite)

        error = self._play_suggestion(suggestion)
        if error is not None:
            _LOGGER.warning("Fallback move rejected (%s); %s forfeits", error.message, color)
            engine.declare_winner(color.opposite)
            return GameOver(color.opposite)
        self.session.remote.stop_thinking()
        return self._after_remote_turn()

    def _play_suggestion(self, suggestion: Suggestion) -> GameError | None:
        """Apply a suggested move, finishing any open capture chain."""
        engine = self.session.engine
        engine.cancel_selection()
        error = engine.select(*suggestion.origin)
        if error is not None:
            return error

        outcome = engine.make_move(*suggestion.destination)
        if outcome.error is not None:
            engine.cancel_selection()
            return outcome.error

        while outcome.continues:
            selected = engine.selected
            assert selected is not None
            next_square = min(engine.legal_destinations(*selected))
            outcome = engine.make_move(*next_square)
            if outcome.error is not None:  # pragma: no cover - legal by construction
                return outcome.error
        return None

    def _after_remote_turn(self) -> Phase:
        phase = self._after_turn()
        if (
            isinstance(phase, Playing)
            and self.session.hints_enabled
            and self._on_hint_request is not None
            and not self.session.is_remote_turn
        ):
            engine = self.session.engine
            self._on_hint_request(
                engine.board.copy(), engine.current_player, engine.history.copy()
            )
        return phase

    # ── Termination ──────────────────────────────────────────────────────

    def _after_turn(self) -> Phase:
        return self._check_game_over() or Playing()

    def _check_game_over(self) -> GameOver | None:
        engine = self.session.engine
        if engine.is_game_over:
            return GameOver(engine.winner)
        winner = engine.check_winner()
        if winner is None and engine.is_stalemate():
            winner = engine.current_player.opposite
        if winner is None:
            return None
        engine.declare_winner(winner)
        return GameOver(winner)

    # ── Projection ───────────────────────────────────────────────────────

    def view(self) -> ViewData:
        session = self.session
        engine = session.engine
        phase = self._phase

        pieces_with_captures: frozenset[Position] = frozenset()
        if isinstance(phase, Playing):
            pieces_with_captures = frozenset(engine.pieces_with_captures())

        possible: frozenset[Position] = frozenset()
        if isinstance(phase, (PieceSelected, MultiCapture)):
            possible = frozenset(session.possible_moves())

        return ViewData(
            phase=phase.kind,
            board=engine.board,
            current_player=engine.current_player,
            cursor=session.cursor,
            selected=engine.selected,
            possible_moves=possible,
            pieces_with_captures=pieces_with_captures,
            status_message=self._status_message(phase, bool(pieces_with_captures)),
            error_message=session.error_message or session.remote.last_error,
            show_remote_thinking=isinstance(phase, RemoteTurn),
            uses_builtin_policy=session.uses_builtin_policy,
            hint=None if isinstance(phase, GameOver) else session.hint,
            last_move=engine.history.last(),
            is_game_over=isinstance(phase, GameOver),
            winner=phase.winner if isinstance(phase, GameOver) else None,
        )

    def _status_message(self, phase: Phase, must_capture: bool) -> str:
        player = self.session.engine.current_player.label
        if isinstance(phase, Welcome):
            return "Welcome to Checkers!"
        if isinstance(phase, Playing):
            return f"{player} must capture!" if must_capture else f"{player}'s turn"
        if isinstance(phase, PieceSelected):
            return "Select a square to move to"
        if isinstance(phase, MultiCapture):
            return "You must continue capturing!"
        if isinstance(phase, RemoteTurn):
            return f"{self.session.current_player.name} is thinking..."
        if phase.winner is None:
            return "Stalemate! No possible moves. Press any key to exit"
        return f"{phase.winner.label} wins! Press any key to exit"
