"""Tests for prompt building and model reply parsing."""

import logging

import pytest

from checkie.config import AppSettings
from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.game.history import MoveHistory
from checkie.remote.advisor import SimpleAdvisor, Suggestion
from checkie.remote.errors import (
    InvalidResponseFormat,
    NoApiKey,
    NoModel,
    NoPossibleMoves,
    ParseError,
)
from checkie.remote.prompting import (
    CompletionAdvisor,
    advisor_from_settings,
    build_hint_prompt,
    build_move_prompt,
    clean_reply,
    describe_moves,
    format_board,
    format_square,
    parse_move_choice,
)

W = Piece(Color.WHITE)
B = Piece(Color.BLACK)

_CAPTURE_BOARD = {(5, 2): W, (4, 3): B}


class TestFormatting:
    def test_square(self) -> None:
        assert format_square(7, 0) == "A1"
        assert format_square(5, 2) == "C3"

    def test_board_listing(self) -> None:
        lines = format_board(Board.initial()).splitlines()
        assert lines[0] == "  A B C D E F G H"
        assert lines[1].startswith("8 . (b) . (b)")
        assert lines[8].startswith("1 (w) . (w)")

    def test_board_marks_kings(self) -> None:
        board = Board.from_pieces({(4, 3): Piece(Color.WHITE, True)})
        assert "[W]" in format_board(board)

    def test_describe_moves(self) -> None:
        moves = [((5, 2), (3, 4), True), ((5, 2), (4, 1), False)]
        text = describe_moves(Board(), moves)
        assert text.splitlines() == [
            "1. C3 to E5 (captures piece at D4)",
            "2. C3 to B4",
        ]


class TestMovePrompt:
    def test_candidates_restricted_to_captures(self) -> None:
        prompt, candidates = build_move_prompt(Board.from_pieces(_CAPTURE_BOARD), Color.WHITE)
        assert candidates == [((5, 2), (3, 4), True)]
        assert "You are playing checkers as White." in prompt
        assert "1. C3 to E5" in prompt
        assert "C3 to B4" not in prompt

    def test_all_moves_when_no_capture(self) -> None:
        _, candidates = build_move_prompt(Board.initial(), Color.BLACK)
        assert len(candidates) == 7

    def test_no_moves(self) -> None:
        with pytest.raises(NoPossibleMoves):
            build_move_prompt(Board.from_pieces({(7, 6): B}), Color.BLACK)

    def test_hint_prompt_includes_history(self) -> None:
        history = MoveHistory()
        history.record((5, 2), (4, 3), Color.WHITE)
        prompt = build_hint_prompt(Board.initial(), Color.BLACK, history)
        assert "1. c3-d4" in prompt
        assert "Black" in prompt

    def test_hint_prompt_without_history(self) -> None:
        prompt = build_hint_prompt(Board.initial(), Color.WHITE, MoveHistory())
        assert "No moves yet" in prompt


class TestParseMoveChoice:
    MOVES = [((5, 0), (4, 1), False), ((5, 2), (4, 3), False), ((5, 4), (4, 5), False)]

    def test_bare_number(self) -> None:
        assert parse_move_choice("2", self.MOVES) == Suggestion((5, 2), (4, 3))

    def test_number_in_prose(self) -> None:
        assert parse_move_choice(" Move 3.\n", self.MOVES) == Suggestion((5, 4), (4, 5))

    def test_first_number_wins(self) -> None:
        assert parse_move_choice("1, not 3", self.MOVES) == Suggestion((5, 0), (4, 1))

    @pytest.mark.parametrize("reply", ["", "none", "0", "4", "42"])
    def test_invalid(self, reply: str) -> None:
        with pytest.raises(InvalidResponseFormat):
            parse_move_choice(reply, self.MOVES)


class TestCompletionAdvisor:
    def test_suggest_move_uses_reply(self) -> None:
        prompts: list[str] = []

        def complete(prompt: str) -> str:
            prompts.append(prompt)
            return "1"

        advisor = CompletionAdvisor(complete)
        board = Board.from_pieces(_CAPTURE_BOARD)
        assert advisor.suggest_move(board, Color.WHITE, MoveHistory()) == Suggestion(
            (5, 2), (3, 4)
        )
        assert len(prompts) == 1

    def test_missing_reply(self) -> None:
        advisor = CompletionAdvisor(lambda _prompt: None)
        with pytest.raises(ParseError):
            advisor.suggest_move(Board.initial(), Color.WHITE, MoveHistory())
        with pytest.raises(ParseError):
            advisor.hint(Board.initial(), Color.WHITE, MoveHistory())

    def test_hint_is_cleaned(self) -> None:
        advisor = CompletionAdvisor(lambda _prompt: " Play C3 to D4.<br>It opens the centre. ")
        text = advisor.hint(Board.initial(), Color.WHITE, MoveHistory())
        assert text == "Play C3 to D4.\nIt opens the centre."

    def test_clean_reply_variants(self) -> None:
        assert clean_reply("a<br />b<br/>c") == "a\nb\nc"


class TestAdvisorFromSettings:
    def test_transport_with_credentials(self) -> None:
        settings = AppSettings(api_key="k", model="gemini")
        advisor = advisor_from_settings(settings, lambda prompt: "1")
        assert isinstance(advisor, CompletionAdvisor)

    def test_missing_key_raises(self) -> None:
        with pytest.raises(NoApiKey):
            advisor_from_settings(AppSettings(model="gemini"), lambda prompt: "1")

    def test_missing_model_raises(self) -> None:
        with pytest.raises(NoModel):
            advisor_from_settings(AppSettings(api_key="k"), lambda prompt: "1")

    def test_test_mode_uses_builtin(self) -> None:
        settings = AppSettings(test_mode=True)
        assert isinstance(advisor_from_settings(settings, lambda prompt: "1"), SimpleAdvisor)

    def test_no_transport_uses_builtin(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="checkie.remote.prompting"):
            advisor = advisor_from_settings(AppSettings(api_key="k", model="gemini"))
        assert isinstance(advisor, SimpleAdvisor)
        assert "without a transport" in caplog.text

    def test_defaults_use_builtin_quietly(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="checkie.remote.prompting"):
            advisor = advisor_from_settings(AppSettings())
        assert isinstance(advisor, SimpleAdvisor)
        assert caplog.text == ""
