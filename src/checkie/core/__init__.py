"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Color, legal_destinations

    board = Board.initial()
    for pos in board.pieces(Color.WHITE):
        print(pos, legal_destinations(board, pos))
"""

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.move_generator import (
    all_moves_for,
    can_capture,
    capture_chains,
    capture_path,
    capture_paths,
    has_any_capture,
    is_valid_move,
    legal_destinations,
    pieces_with_capture,
    regular_destinations,
)
from checkie.core.notation import move_to_notation, parse_move
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import Position, midpoint, parse_square, square_name

__all__ = [
    # Enums / types
    "Color",
    "Position",
    "midpoint",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Rules",
    # Move generation
    "all_moves_for",
    "can_capture",
    "capture_chains",
    "capture_path",
    "capture_paths",
    "has_any_capture",
    "is_valid_move",
    "legal_destinations",
    "pieces_with_capture",
    "regular_destinations",
    # Notation
    "move_to_notation",
    "parse_move",
]
