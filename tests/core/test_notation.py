"""Tests for square names and move notation."""

import pytest

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.notation import move_to_notation, parse_move
from checkie.core.piece import Piece
from checkie.core.types import parse_square, square_name


class TestSquares:
    def test_corners(self) -> None:
        assert square_name((7, 0)) == "a1"
        assert square_name((0, 7)) == "h8"

    def test_parse(self) -> None:
        assert parse_square("a1") == (7, 0)
        assert parse_square("C3") == (5, 2)

    @pytest.mark.parametrize("name", ["", "a", "a0", "a9", "i1", "11", "ax"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_every_square_round_trips(self) -> None:
        for row in range(8):
            for col in range(8):
                assert parse_square(square_name((row, col))) == (row, col)


class TestMoveNotation:
    def test_plain_step(self) -> None:
        assert move_to_notation(Move((5, 2), (4, 3))) == "c3-d4"

    def test_str_uses_notation(self) -> None:
        assert str(Move((5, 2), (4, 3))) == "c3-d4"

    def test_single_capture(self) -> None:
        move = Move((5, 2), (3, 4), captured=((4, 3),))
        assert move_to_notation(move) == "c3xe5(d4)"

    def test_chain_keeps_capture_order(self) -> None:
        move = Move((6, 1), (2, 1), captured=((5, 2), (3, 2)))
        assert move_to_notation(move) == "b2xb6(c3,c5)"

    def test_promotion_marker(self) -> None:
        move = Move((1, 2), (0, 3), became_king=True)
        assert move_to_notation(move) == "c7-d8K"

    def test_round_trip(self) -> None:
        moves = [
            Move((5, 2), (4, 3)),
            Move((2, 1), (3, 0), player=Color.BLACK),
            Move((6, 1), (2, 1), captured=((5, 2), (3, 2))),
            Move((2, 5), (0, 3), captured=((1, 4),), became_king=True),
        ]
        for move in moves:
            assert parse_move(move_to_notation(move), move.player) == move

    @pytest.mark.parametrize(
        "text",
        ["", "c3", "c3d4", "c3-d4(", "c3-d4(d4)", "c3xd4", "c3-z9", "c3-d4Q"],
    )
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_move(text)


class TestPieceText:
    def test_chars(self) -> None:
        assert str(Piece(Color.WHITE)) == "w"
        assert str(Piece(Color.BLACK, True)) == "B"

    def test_from_char(self) -> None:
        assert Piece.from_char("W") == Piece(Color.WHITE, True)
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_display(self) -> None:
        assert Piece(Color.WHITE).display == "(w)"
        assert Piece(Color.BLACK, True).display == "[B]"
