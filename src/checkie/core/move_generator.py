"""Legal destination generation and capture-chain search.

Every function here is pure with respect to the board passed in: the board is
read, never modified. The capture search explores each branch on its own copy
so sibling branches never observe each other's speculative captures.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.types import DIAGONALS, Position, midpoint

# (origin, destination, is_capture)
StepMove = tuple[Position, Position, bool]


def _step_offsets(piece: Piece) -> tuple[Position, ...]:
    """Diagonal unit offsets available to *piece*."""
    if piece.is_king:
        return DIAGONALS
    forward = piece.color.forward
    return tuple((dr, dc) for dr, dc in DIAGONALS if dr == forward)


def _jump(
    board: Board, piece: Piece, origin: Position, offset: Position
) -> Position | None:
    """Landing square of a single jump along *offset*, or None if illegal."""
    dr, dc = offset
    row, col = origin
    landing = (row + 2 * dr, col + 2 * dc)
    if not board.in_bounds(*landing) or not board.is_empty(landing):
        return None
    jumped = board.get(row + dr, col + dc)
    if jumped is None or jumped.color == piece.color:
        return None
    return landing


# -- Regular moves ---------------------------------------------------------


def regular_destinations(board: Board, pos: Position) -> set[Position]:
    """One-step diagonal destinations for the piece on *pos*."""
    piece = board[pos]
    if piece is None:
        return set()
    row, col = pos
    destinations: set[Position] = set()
    for dr, dc in _step_offsets(piece):
        target = (row + dr, col + dc)
        if board.in_bounds(*target) and board.is_empty(target):
            destinations.add(target)
    return destinations


# -- Capture search --------------------------------------------------------


def _search_chains(
    board: Board,
    current: Position,
    piece: Piece,
    path: list[Position],
    found: list[list[Position]],
) -> None:
    extended = False
    for offset in _step_offsets(piece):
        landing = _jump(board, piece, current, offset)
        if landing is None:
            continue
        extended = True
        branch = board.copy()
        branch.set(*midpoint(current, landing), None)
        _search_chains(branch, landing, piece, [*path, landing], found)

    if not extended and path:
        found.append(path)


def capture_paths(board: Board, pos: Position) -> list[list[Position]]:
    """Every complete capture chain from *pos* as a list of landing squares.

    Direction rules are applied per hop using the moving piece as it stood on
    *pos*; promotion during a chain does not widen the search.
    """
    piece = board[pos]
    if piece is None:
        return []
    found: list[list[Position]] = []
    _search_chains(board, pos, piece, [], found)
    return found


def capture_chains(board: Board, pos: Position) -> set[Position]:
    """Terminal squares of all capture chains from *pos* (duplicates removed)."""
    return {path[-1] for path in capture_paths(board, pos)}


def capture_path(
    board: Board, origin: Position, destination: Position
) -> list[Position] | None:
    """First capture chain from *origin* ending on *destination*, if any."""
    for path in capture_paths(board, origin):
        if path[-1] == destination:
            return path
    return None


def can_capture(board: Board, pos: Position) -> bool:
    """Whether the piece on *pos* has at least one single jump available."""
    piece = board[pos]
    if piece is None:
        return False
    return any(
        _jump(board, piece, pos, offset) is not None for offset in _step_offsets(piece)
    )


def legal_destinations(board: Board, pos: Position) -> set[Position]:
    """Capture terminals when any exist, otherwise regular destinations."""
    captures = capture_chains(board, pos)
    if captures:
        return captures
    return regular_destinations(board, pos)


# -- Single-step validation ------------------------------------------------


def is_valid_move(
    board: Board, origin: Position, destination: Position, piece: Piece
) -> bool:
    """Validate one diagonal step (length 1) or one jump (length 2)."""
    if not board.in_bounds(*destination) or not board.is_empty(destination):
        return False

    row_diff = destination[0] - origin[0]
    col_diff = destination[1] - origin[1]
    if abs(row_diff) != abs(col_diff) or abs(row_diff) not in (1, 2):
        return False

    if not piece.is_king and (row_diff > 0) != (piece.color.forward > 0):
        return False

    if abs(row_diff) == 1:
        return True

    jumped = board[midpoint(origin, destination)]
    return jumped is not None and jumped.color != piece.color


# -- Whole-side scans ------------------------------------------------------


def pieces_with_capture(board: Board, color: Color) -> set[Position]:
    """Squares of *color*'s pieces that have a capture available."""
    return {pos for pos in board.pieces(color) if can_capture(board, pos)}


def has_any_capture(board: Board, color: Color) -> bool:
    return any(can_capture(board, pos) for pos in board.pieces(color))


def all_moves_for(board: Board, color: Color) -> list[StepMove]:
    """Every single-step move (jumps included) for *color*, row-major order."""
    moves: list[StepMove] = []
    for pos in board.pieces(color):
        piece = board[pos]
        assert piece is not None
        for offset in _step_offsets(piece):
            landing = _jump(board, piece, pos, offset)
            if landing is not None:
                moves.append((pos, landing, True))
        for target in sorted(regular_destinations(board, pos)):
            moves.append((pos, target, False))
    return moves
