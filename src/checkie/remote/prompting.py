"""Text exchanged with a language-model move advisor.

Builds the prompts (board listing, numbered candidate moves, history) and
turns the model's free-text answer back into a :class:`Suggestion`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.core.move_generator import StepMove, all_moves_for
from checkie.core.types import midpoint
from checkie.remote.advisor import IMoveAdvisor, SimpleAdvisor, Suggestion
from checkie.remote.errors import (
    InvalidResponseFormat,
    NoApiKey,
    NoModel,
    NoPossibleMoves,
    ParseError,
)

if TYPE_CHECKING:
    from checkie.config import AppSettings
    from checkie.core.board import Board
    from checkie.game.history import MoveHistory

_LOGGER = logging.getLogger(__name__)

MOVE_PROMPT = """You are playing checkers as {player_color}.

Current board ({white} = White, {black} = Black, brackets mark kings):
{board_state}

Available moves:
{available_moves}

Reply with the number of the move you choose and nothing else."""

HINT_PROMPT = """You are a checkers coach helping the {player_color} player.

Board:
{board_state}

Moves so far: {move_history}

Legal moves:
{available_moves}

Suggest one move in a short sentence and explain why."""

_DIGITS_RE = re.compile(r"\d+")


def format_square(row: int, col: int, size: int = 8) -> str:
    """Display coordinate, e.g. (7, 0) -> 'A1'."""
    return f"{chr(ord('A') + col)}{size - row}"


def format_board(board: Board) -> str:
    """Grid listing with file letters on top and ranks down the left side."""
    files = " ".join(chr(ord("A") + c) for c in range(board.size))
    lines = [f"  {files}"]
    for row in range(board.size):
        cells = []
        for col in range(board.size):
            piece = board.get(row, col)
            cells.append(piece.display if piece is not None else ".")
        lines.append(f"{board.size - row} {' '.join(cells)} ")
    return "\n".join(lines) + "\n"


def describe_moves(board: Board, moves: list[StepMove]) -> str:
    """Numbered candidate list, e.g. ``1. C3 to D4``."""
    lines: list[str] = []
    for i, (origin, destination, is_capture) in enumerate(moves, 1):
        text = (
            f"{i}. {format_square(*origin, board.size)} to "
            f"{format_square(*destination, board.size)}"
        )
        if is_capture:
            jumped = midpoint(origin, destination)
            text += f" (captures piece at {format_square(*jumped, board.size)})"
        lines.append(text)
    return "\n".join(lines)


def build_move_prompt(board: Board, color: Color) -> tuple[str, list[StepMove]]:
    """Prompt asking for a move, plus the candidate list it enumerates."""
    moves = all_moves_for(board, color)
    if not moves:
        raise NoPossibleMoves()
    captures = [m for m in moves if m[2]]
    candidates = captures or moves
    prompt = MOVE_PROMPT.format(
        player_color=color.label,
        white="(w)",
        black="(b)",
        board_state=format_board(board),
        available_moves=describe_moves(board, candidates),
    )
    return prompt, candidates


def build_hint_prompt(board: Board, color: Color, history: MoveHistory) -> str:
    moves = all_moves_for(board, color)
    notation = history.to_notation()
    return HINT_PROMPT.format(
        player_color=color.label,
        board_state=format_board(board),
        move_history=notation or "No moves yet",
        available_moves=describe_moves(board, moves) or "No moves available",
    )


def parse_move_choice(text: str, moves: list[StepMove]) -> Suggestion:
    """Map a reply such as ``"3"`` or ``"Move 3."`` onto ``moves[2]``."""
    reply = text.strip()
    found = _DIGITS_RE.findall(reply)
    if not found:
        raise InvalidResponseFormat(f"non-numeric response: {reply!r}")

    index = int(found[0])
    if not 1 <= index <= len(moves):
        raise InvalidResponseFormat(
            f"move index {index} is out of range 1-{len(moves)} in {reply!r}"
        )
    origin, destination, _ = moves[index - 1]
    return Suggestion(origin, destination)


def clean_reply(text: str) -> str:
    """Strip HTML line breaks some models emit in prose answers."""
    for tag in ("<br />", "<br/>", "<br>"):
        text = text.replace(tag, "\n")
    return text.strip()


class CompletionAdvisor:
    """Advisor backed by a text-completion callable (prompt in, reply out).

    The callable owns transport, authentication and retries; it should raise
    :class:`~checkie.remote.errors.AdvisorError` subclasses on failure.
    """

    __slots__ = ("_complete",)

    def __init__(self, complete: Callable[[str], str | None]) -> None:
        self._complete = complete

    def suggest_move(
        self, board: Board, color: Color, history: MoveHistory
    ) -> Suggestion:
        del history
        prompt, candidates = build_move_prompt(board, color)
        reply = self._complete(prompt)
        if reply is None:
            raise ParseError("no text content in response")
        return parse_move_choice(reply, candidates)

    def hint(self, board: Board, color: Color, history: MoveHistory) -> str:
        reply = self._complete(build_hint_prompt(board, color, history))
        if reply is None:
            raise ParseError("no text content in response")
        return clean_reply(reply)


def advisor_from_settings(
    settings: AppSettings,
    complete: Callable[[str], str | None] | None = None,
) -> IMoveAdvisor:
    """Pick the advisor the settings ask for.

    With a *complete* transport and test mode off, the model path is taken and
    missing credentials raise :class:`NoApiKey` / :class:`NoModel`. Everything
    else gets the built-in :class:`SimpleAdvisor`.
    """
    if complete is None or settings.test_mode:
        if settings.use_remote_model:
            _LOGGER.warning("Model %s configured without a transport", settings.model)
        return SimpleAdvisor()
    if not settings.api_key:
        raise NoApiKey()
    if not settings.model:
        raise NoModel()
    return CompletionAdvisor(complete)
