"""GameSession — everything one match needs besides the current phase."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.config import AppSettings
from checkie.core.enums import Color
from checkie.core.types import Position
from checkie.game.engine import GameEngine
from checkie.game.interfaces import IPlayer
from checkie.game.player import HumanPlayer, RemotePlayer


@dataclass
class RemoteStatus:
    """Progress of the remote side's current move request."""

    is_thinking: bool = False
    last_error: str | None = None

    def start_thinking(self) -> None:
        self.is_thinking = True
        self.last_error = None

    def stop_thinking(self) -> None:
        self.is_thinking = False

    def set_error(self, error: str) -> None:
        self.last_error = error
        self.is_thinking = False

    def clear_error(self) -> None:
        self.last_error = None


@dataclass
class GameSession:
    """Engine plus the per-match UI state: cursor, players, messages, hint.

    This is a pure data/logic class — no threading, no I/O.
    """

    engine: GameEngine = field(default_factory=GameEngine)
    players: dict[Color, IPlayer] = field(default_factory=dict)
    cursor: Position = (0, 0)
    error_message: str | None = None
    hint: str | None = None
    remote: RemoteStatus = field(default_factory=RemoteStatus)
    hints_enabled: bool = False
    uses_builtin_policy: bool = True

    def __post_init__(self) -> None:
        for color in Color:
            self.players.setdefault(color, HumanPlayer(color, color.label))

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        engine: GameEngine | None = None,
        remote_player: RemotePlayer | None = None,
    ) -> GameSession:
        """Human vs. remote (or human vs. human) session described by *settings*."""
        players: dict[Color, IPlayer] = {}
        if settings.remote_color is not None:
            players[settings.remote_color] = remote_player or RemotePlayer(
                settings.remote_color
            )
        return cls(
            engine=engine or GameEngine(),
            players=players,
            hints_enabled=settings.hints_enabled,
            uses_builtin_policy=not settings.use_remote_model,
        )

    # ── Players ──────────────────────────────────────────────────────────

    def player(self, color: Color) -> IPlayer:
        return self.players[color]

    @property
    def current_player(self) -> IPlayer:
        return self.players[self.engine.current_player]

    @property
    def is_remote_turn(self) -> bool:
        return not self.current_player.is_human

    # ── Cursor ───────────────────────────────────────────────────────────

    def move_cursor(self, d_row: int, d_col: int) -> None:
        """Shift the cursor, clamped to the board edges."""
        last = self.engine.board.size - 1
        row = min(max(self.cursor[0] + d_row, 0), last)
        col = min(max(self.cursor[1] + d_col, 0), last)
        self.cursor = (row, col)

    # ── Derived view state ───────────────────────────────────────────────

    def possible_moves(self) -> set[Position]:
        selected = self.engine.selected
        if selected is None:
            return set()
        return self.engine.legal_destinations(*selected)
