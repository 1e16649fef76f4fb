"""High-level checkers rules: promotion, winner, stalemate."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move_generator import has_any_capture, regular_destinations
from checkie.core.piece import Piece


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy: a side left without any move loses (the opponent wins);
    # no draw outcome is produced.

    @staticmethod
    def promotion_row(color: Color, size: int) -> int:
        """Far row for *color*: row 0 for White, the last row for Black."""
        return 0 if color == Color.WHITE else size - 1

    @staticmethod
    def should_promote(piece: Piece, row: int, size: int) -> bool:
        return not piece.is_king and row == Rules.promotion_row(piece.color, size)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        """*color* has neither a capture nor a regular step anywhere."""
        if has_any_capture(board, color):
            return False
        return not any(regular_destinations(board, pos) for pos in board.pieces(color))

    @staticmethod
    def winner(board: Board) -> Color | None:
        """The only color left on the board, if exactly one remains."""
        has_white = has_black = False
        for pos in board.pieces():
            piece = board[pos]
            assert piece is not None
            if piece.color == Color.WHITE:
                has_white = True
            else:
                has_black = True
            if has_white and has_black:
                return None

        if has_white and not has_black:
            return Color.WHITE
        if has_black and not has_white:
            return Color.BLACK
        return None

    @staticmethod
    def game_winner(board: Board, side_to_move: Color) -> Color | None:
        """Winner once the game is decided, ``None`` while it is still on.

        A side to move with no legal move loses to its opponent.
        """
        winner = Rules.winner(board)
        if winner is not None:
            return winner
        if Rules.is_stalemate(board, side_to_move):
            return side_to_move.opposite
        return None
