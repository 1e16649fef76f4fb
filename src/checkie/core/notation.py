"""Compact move notation.

Grammar for a single move (board coordinates use :func:`square_name`)::

    <from> ('-' | 'x') <to> [ '(' <sq> (',' <sq>)* ')' ] [ 'K' ]

``-`` marks a plain step, ``x`` a capture; the parenthesised list holds the
captured squares in capture order and ``K`` marks a promotion, e.g.
``b2xf6(c3,e5)K``.
"""

from __future__ import annotations

import re

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.types import DEFAULT_SIZE, parse_square, square_name

_SQ = r"[a-zA-Z]\d{1,2}"
_MOVE_RE = re.compile(
    rf"^(?P<origin>{_SQ})(?P<sep>[-x])(?P<dest>{_SQ})"
    rf"(?:\((?P<captured>{_SQ}(?:,{_SQ})*)\))?(?P<king>K)?$"
)


def move_to_notation(move: Move, size: int = DEFAULT_SIZE) -> str:
    """Render *move*, e.g. ``c3-d4`` or ``b2xf6(c3,e5)K``."""
    sep = "x" if move.captured else "-"
    text = f"{square_name(move.origin, size)}{sep}{square_name(move.destination, size)}"
    if move.captured:
        text += "(" + ",".join(square_name(sq, size) for sq in move.captured) + ")"
    if move.became_king:
        text += "K"
    return text


def parse_move(
    text: str, player: Color = Color.WHITE, size: int = DEFAULT_SIZE
) -> Move:
    """Parse notation produced by :func:`move_to_notation`."""
    m = _MOVE_RE.match(text.strip())
    if m is None:
        raise ValueError(f"Invalid move notation: {text!r}")

    captured: tuple[tuple[int, int], ...] = ()
    if m.group("captured"):
        captured = tuple(
            parse_square(sq, size) for sq in m.group("captured").split(",")
        )
    if (m.group("sep") == "x") != bool(captured):
        raise ValueError(f"Capture marker does not match captured squares: {text!r}")

    return Move(
        origin=parse_square(m.group("origin"), size),
        destination=parse_square(m.group("dest"), size),
        captured=captured,
        became_king=m.group("king") is not None,
        player=player,
    )
