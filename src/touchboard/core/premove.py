"""Premove destinations — geometric piece mobility.

A premove hint answers "could this piece ever move there?" and nothing
more: occupancy, blocking pieces, check and pins are all ignored. Real
legality belongs to whoever applies the move.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from touchboard.core.enums import Color, Role
from touchboard.core.piece import Piece
from touchboard.core.placement import Placement
from touchboard.core.types import ALL_SQUARES, Square

Mobility: TypeAlias = Callable[[int, int, int, int], bool]


def _diff(a: int, b: int) -> int:
    return abs(a - b)


# ── Per-role predicates ─────────────────────────────────────────────────────


def _pawn(color: Color) -> Mobility:
    # Double step allowed from the first two ranks, for Horde setups
    if color == Color.WHITE:

        def white_pawn(x1: int, y1: int, x2: int, y2: int) -> bool:
            return _diff(x1, x2) < 2 and (
                y2 == y1 + 1 or (y1 <= 2 and y2 == y1 + 2 and x1 == x2)
            )

        return white_pawn

    def black_pawn(x1: int, y1: int, x2: int, y2: int) -> bool:
        return _diff(x1, x2) < 2 and (
            y2 == y1 - 1 or (y1 >= 7 and y2 == y1 - 2 and x1 == x2)
        )

    return black_pawn


def _knight(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd, yd = _diff(x1, x2), _diff(y1, y2)
    return (xd == 1 and yd == 2) or (xd == 2 and yd == 1)


def _bishop(x1: int, y1: int, x2: int, y2: int) -> bool:
    return _diff(x1, x2) == _diff(y1, y2)


def _rook(x1: int, y1: int, x2: int, y2: int) -> bool:
    return x1 == x2 or y1 == y2


def _queen(x1: int, y1: int, x2: int, y2: int) -> bool:
    return _bishop(x1, y1, x2, y2) or _rook(x1, y1, x2, y2)


def _king(color: Color, rook_files: frozenset[int], can_castle: bool) -> Mobility:
    back_rank = color.back_rank

    def king(x1: int, y1: int, x2: int, y2: int) -> bool:
        if _diff(x1, x2) < 2 and _diff(y1, y2) < 2:
            return True
        if not (can_castle and y1 == y2 == back_rank):
            return False
        # Stepping onto one of its own rooks signals castling too (Chess960)
        return (x1 == 5 and x2 in (3, 7)) or x2 in rook_files

    return king


_FIXED: dict[Role, Mobility] = {
    Role.KNIGHT: _knight,
    Role.BISHOP: _bishop,
    Role.ROOK: _rook,
    Role.QUEEN: _queen,
}


# ── Public API ──────────────────────────────────────────────────────────────


def rook_files_of(placement: Placement, color: Color) -> frozenset[int]:
    """Files currently holding a rook of *color*."""
    return frozenset(
        sq.file
        for sq, piece in placement.items()
        if piece.color == color and piece.role == Role.ROOK
    )


def mobility(piece: Piece, placement: Placement, can_castle: bool) -> Mobility:
    """Return the geometric movement predicate for *piece*."""
    if piece.role == Role.PAWN:
        return _pawn(piece.color)
    if piece.role == Role.KING:
        return _king(piece.color, rook_files_of(placement, piece.color), can_castle)
    return _FIXED[piece.role]


def premove_dests(
    placement: Placement, square: Square, can_castle: bool
) -> frozenset[Square]:
    """All squares the piece on *square* could geometrically reach.

    Returns an empty set when *square* is empty. The origin itself is never
    part of the result.
    """
    piece = placement.get(square)
    if piece is None:
        return frozenset()

    reach = mobility(piece, placement, can_castle)
    x1, y1 = square.file, square.rank
    return frozenset(
        dest
        for dest in ALL_SQUARES
        if dest != square and reach(x1, y1, dest.file, dest.rank)
    )
