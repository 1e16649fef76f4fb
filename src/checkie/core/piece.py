"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from checkie.core.enums import Color

# Text glyph <-> (Color, is_king)
_CHAR_MAP: dict[str, tuple[Color, bool]] = {
    "w": (Color.WHITE, False),
    "W": (Color.WHITE, True),
    "b": (Color.BLACK, False),
    "B": (Color.BLACK, True),
}

_CHARS: dict[tuple[Color, bool], str] = {v: k for k, v in _CHAR_MAP.items()}

_DISPLAY: dict[tuple[Color, bool], str] = {
    (Color.WHITE, False): "(w)",
    (Color.WHITE, True): "[W]",
    (Color.BLACK, False): "(b)",
    (Color.BLACK, True): "[B]",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checkers piece.

    Pieces are replaced, never mutated: promotion produces a new king piece
    via :meth:`promoted`.
    """

    color: Color
    is_king: bool = False

    def promoted(self) -> Piece:
        """King version of this piece (idempotent)."""
        if self.is_king:
            return self
        return replace(self, is_king=True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Single character: lowercase man, uppercase king."""
        return _CHARS[(self.color, self.is_king)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its character, e.g. 'B' -> black king."""
        try:
            color, is_king = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, is_king)

    @property
    def display(self) -> str:
        """Three-character cell text used in board listings, e.g. ``[W]``."""
        return _DISPLAY[(self.color, self.is_king)]
