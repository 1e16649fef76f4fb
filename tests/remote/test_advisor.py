"""Tests for the built-in advisor and the advisor error taxonomy."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.game.history import MoveHistory
from checkie.remote.advisor import IMoveAdvisor, SimpleAdvisor, Suggestion
from checkie.remote.errors import (
    AdvisorError,
    AdvisorTimeout,
    InvalidResponseFormat,
    NoApiKey,
    NoModel,
    NoPossibleMoves,
    ParseError,
    RequestFailed,
)

W = Piece(Color.WHITE)
B = Piece(Color.BLACK)


class TestSimpleAdvisor:
    def test_satisfies_protocol(self) -> None:
        advisor: IMoveAdvisor = SimpleAdvisor()
        assert advisor.suggest_move(Board.initial(), Color.WHITE, MoveHistory())

    def test_first_regular_move(self) -> None:
        suggestion = SimpleAdvisor().suggest_move(Board.initial(), Color.WHITE, MoveHistory())
        assert suggestion == Suggestion((5, 0), (4, 1))

    def test_black_first_move(self) -> None:
        suggestion = SimpleAdvisor().suggest_move(Board.initial(), Color.BLACK, MoveHistory())
        assert suggestion == Suggestion((2, 1), (3, 0))

    def test_prefers_capture(self) -> None:
        board = Board.from_pieces({(5, 0): W, (5, 6): W, (4, 5): B})
        suggestion = SimpleAdvisor().suggest_move(board, Color.WHITE, MoveHistory())
        assert suggestion == Suggestion((5, 6), (3, 4))

    def test_no_moves(self) -> None:
        board = Board.from_pieces({(7, 6): B, (4, 3): W})
        with pytest.raises(NoPossibleMoves):
            SimpleAdvisor().suggest_move(board, Color.BLACK, MoveHistory())

    def test_does_not_touch_board(self) -> None:
        board = Board.initial()
        SimpleAdvisor().suggest_move(board, Color.WHITE, MoveHistory())
        assert board == Board.initial()

    def test_hint_text(self) -> None:
        hint = SimpleAdvisor().hint(Board.initial(), Color.WHITE, MoveHistory())
        assert hint == "Try moving a3 to b4."


class TestErrors:
    @pytest.mark.parametrize(
        "error",
        [
            RequestFailed("503"),
            ParseError("empty"),
            NoApiKey(),
            NoModel(),
            InvalidResponseFormat("abc"),
            NoPossibleMoves(),
            AdvisorTimeout(2.5),
        ],
    )
    def test_all_are_advisor_errors(self, error: AdvisorError) -> None:
        assert isinstance(error, AdvisorError)
        assert str(error)

    def test_messages(self) -> None:
        assert str(RequestFailed("503")) == "API request failed: 503"
        assert str(NoPossibleMoves()) == "No possible moves available."
        assert "GEMINI_API_KEY" in str(NoApiKey())

    def test_timeout_keeps_seconds(self) -> None:
        error = AdvisorTimeout(2.5)
        assert error.seconds == 2.5
        assert str(error) == "No answer within 2.5s"
