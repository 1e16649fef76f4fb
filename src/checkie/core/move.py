"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color
from checkie.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of one completed turn segment.

    ``captured`` lists the jumped squares in the order they were taken;
    it is empty for a plain step.
    """

    origin: Position
    destination: Position
    captured: tuple[Position, ...] = ()
    became_king: bool = False
    player: Color = Color.WHITE

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        from checkie.core.notation import move_to_notation

        return move_to_notation(self)
