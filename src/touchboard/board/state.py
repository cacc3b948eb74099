"""Board state record and the default interaction predicates.

The game layer owns :class:`BoardState`; the board only reads it and
proposes changes. The helpers here are what a host without its own rules
engine plugs into the board: who may pick up what, where a picked piece
may go, and how a proposed move changes the placement.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import IntEnum

from touchboard.board.config import BoardConfig, MovableColor
from touchboard.core.enums import Color, Role
from touchboard.core.piece import Piece
from touchboard.core.placement import Placement
from touchboard.core.premove import premove_dests
from touchboard.core.types import ALL_SQUARES, Square

Dests = Mapping[Square, frozenset[Square]]


@dataclass(frozen=True, slots=True)
class BoardState:
    """Snapshot of everything the board renders.

    Attributes:
        pieces: Square → piece placement.
        turn_color: Side to move.
        selected: Currently selected square.
        dests: Legal destinations per origin, supplied by the game layer.
            ``None`` means the game layer gave none.
        last_move: Origin and destination of the last applied move.
        check: Square of a king in check, if any.
    """

    pieces: Placement = field(default_factory=dict)
    turn_color: Color = Color.WHITE
    selected: Square | None = None
    dests: Dests | None = None
    last_move: tuple[Square, Square] | None = None
    check: Square | None = None


class Light(IntEnum):
    """Square highlight kinds, in increasing precedence."""

    LAST_MOVE = 1
    CHECK = 2
    MOVE_DEST = 3
    PREMOVE_DEST = 4
    SELECTED = 5


# ── Predicates ──────────────────────────────────────────────────────────────


def is_movable(state: BoardState, config: BoardConfig, sq: Square) -> bool:
    """Whether the piece on *sq* may be picked up now (move or premove)."""
    piece = state.pieces.get(sq)
    if piece is None:
        return False
    if config.movable_color == MovableColor.BOTH:
        return True
    if not config.movable_color.allows(piece.color):
        return False
    return piece.color == state.turn_color or config.premoves_enabled


def is_premovable(state: BoardState, config: BoardConfig, sq: Square) -> bool:
    """Whether the piece on *sq* belongs to the local side while it waits."""
    piece = state.pieces.get(sq)
    return (
        piece is not None
        and config.premoves_enabled
        and config.movable_color not in (MovableColor.BOTH, MovableColor.NONE)
        and config.movable_color.allows(piece.color)
        and piece.color != state.turn_color
    )


def is_draggable(state: BoardState, config: BoardConfig, sq: Square) -> bool:
    return config.drag_enabled and is_movable(state, config, sq)


def move_dests(
    state: BoardState, config: BoardConfig, orig: Square
) -> frozenset[Square]:
    """Destinations offered for a regular (non-pre) move from *orig*."""
    if config.free_moves:
        return frozenset(sq for sq in ALL_SQUARES if sq != orig)
    if state.dests is None:
        return frozenset()
    return state.dests.get(orig, frozenset())


def can_move(
    state: BoardState, config: BoardConfig, orig: Square, dest: Square
) -> bool:
    piece = state.pieces.get(orig)
    if piece is None or orig == dest:
        return False
    if not config.movable_color.allows(piece.color):
        return False
    if config.movable_color != MovableColor.BOTH and piece.color != state.turn_color:
        return False
    if config.free_moves:
        return True
    return state.dests is not None and dest in state.dests.get(orig, frozenset())


def can_premove(
    state: BoardState, config: BoardConfig, orig: Square, dest: Square
) -> bool:
    return (
        orig != dest
        and is_premovable(state, config, orig)
        and dest in premove_dests(state.pieces, orig, config.castle_premoves)
    )


def can_move_to(
    state: BoardState, config: BoardConfig, orig: Square, dest: Square
) -> bool:
    return can_move(state, config, orig, dest) or can_premove(
        state, config, orig, dest
    )


# ── Transitions ─────────────────────────────────────────────────────────────


def select_square(
    state: BoardState, config: BoardConfig, sq: Square | None
) -> BoardState:
    """Return *state* with *sq* selected, or with the selection cleared.

    Only squares holding a movable piece can be selected; anything else
    clears the selection.
    """
    if sq is None or not is_movable(state, config, sq):
        return replace(state, selected=None)
    return replace(state, selected=sq)


def base_move(state: BoardState, orig: Square, dest: Square) -> BoardState:
    """Apply a move to the placement without any legality check.

    The moving piece keeps its identity; whatever stood on *dest* is
    captured. A king stepping onto its own rook, or two files along its
    home rank, castles with that rook when both landing squares are free;
    otherwise it is a plain move.
    """
    piece = state.pieces.get(orig)
    if piece is None or orig == dest:
        return state

    pieces = dict(state.pieces)
    del pieces[orig]

    castle = _castling_rook(state.pieces, piece, orig, dest)
    if castle is not None:
        rook_sq, king_dest, rook_dest = castle
        rook = pieces.pop(rook_sq)
        pieces.pop(dest, None)
        pieces[king_dest] = piece
        pieces[rook_dest] = rook
    else:
        pieces[dest] = piece

    return replace(
        state,
        pieces=pieces,
        turn_color=piece.color.opposite,
        selected=None,
        dests=None,
        last_move=(orig, dest),
        check=None,
    )


def _castling_rook(
    pieces: Placement, king: Piece, orig: Square, dest: Square
) -> tuple[Square, Square, Square] | None:
    """(rook square, king destination, rook destination) for a castling move."""
    if king.role != Role.KING:
        return None
    rank = king.color.back_rank
    if orig.rank != rank or dest.rank != rank:
        return None

    target = pieces.get(dest)
    if (
        target is not None
        and target.color == king.color
        and target.role == Role.ROOK
    ):
        rook_sq = dest
    elif orig.file == 5 and dest.file in (3, 7):
        rook_sq = Square(1 if dest.file == 3 else 8, rank)
        rook = pieces.get(rook_sq)
        if rook is None or rook.color != king.color or rook.role != Role.ROOK:
            return None
    else:
        return None

    if rook_sq.file < orig.file:
        king_dest, rook_dest = Square(3, rank), Square(4, rank)
    else:
        king_dest, rook_dest = Square(7, rank), Square(6, rank)

    # landing squares must be empty or held by the castling pair itself
    for sq in (king_dest, rook_dest):
        if sq in pieces and sq not in (orig, rook_sq):
            return None
    return rook_sq, king_dest, rook_dest


# ── Highlights ──────────────────────────────────────────────────────────────


def compute_square_lights(
    state: BoardState, config: BoardConfig
) -> dict[Square, Light]:
    """Highlight for every lit square; later kinds override earlier ones."""
    lights: dict[Square, Light] = {}
    if state.last_move is not None:
        for sq in state.last_move:
            lights[sq] = Light.LAST_MOVE
    if state.check is not None:
        lights[state.check] = Light.CHECK

    sel = state.selected
    if sel is not None and state.pieces.get(sel) is not None:
        if config.show_dests:
            if is_premovable(state, config, sel):
                for sq in premove_dests(state.pieces, sel, config.castle_premoves):
                    lights[sq] = Light.PREMOVE_DEST
            elif not config.free_moves and is_movable(state, config, sel):
                for sq in move_dests(state, config, sel):
                    lights[sq] = Light.MOVE_DEST
        lights[sel] = Light.SELECTED
    return lights
