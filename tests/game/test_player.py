"""Tests for Player implementations."""

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.game.history import MoveHistory
from checkie.game.player import HumanPlayer, RemotePlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert "black" in p.name.lower()

    def test_request_move_not_dispatched(self) -> None:
        p = HumanPlayer(Color.WHITE)
        assert p.request_move(Board.initial(), MoveHistory()) is False

    def test_cancel_noop(self) -> None:
        p = HumanPlayer(Color.WHITE)
        p.cancel()  # should not raise


class TestRemotePlayer:
    def test_properties(self) -> None:
        p = RemotePlayer(Color.BLACK, "Gemini")
        assert p.color == Color.BLACK
        assert p.name == "Gemini"
        assert p.is_human is False

    def test_request_move_calls_callback_with_copy(self) -> None:
        called_with = []
        p = RemotePlayer(
            Color.BLACK,
            on_request_move=lambda board, color, history: called_with.append(
                (board, color, history)
            ),
        )
        board = Board.initial()
        history = MoveHistory()
        history.record((5, 0), (4, 1), Color.WHITE)
        assert p.request_move(board, history) is True
        assert len(called_with) == 1
        sent, color, sent_history = called_with[0]
        assert sent == board and sent is not board
        assert color == Color.BLACK
        assert sent_history is not history
        assert sent_history.moves == history.moves
        history.record((2, 1), (3, 0), Color.BLACK)
        assert len(sent_history) == 1

    def test_cancel_calls_callback(self) -> None:
        cancelled = []
        p = RemotePlayer(Color.BLACK, on_cancel=lambda: cancelled.append(True))
        p.cancel()
        assert cancelled == [True]

    def test_no_callback_no_error(self) -> None:
        p = RemotePlayer(Color.BLACK)
        assert p.request_move(Board.initial(), MoveHistory()) is False
        p.cancel()
