"""Core domain layer — squares, pieces and premove mobility, no Qt.

Quick start::

    from touchboard.core import Square, placement_from_fen, premove_dests

    pieces = placement_from_fen("8/8/8/8/8/8/8/R3K2R")
    premove_dests(pieces, Square.parse("e1"), can_castle=True)
"""

from touchboard.core.enums import Color, Role
from touchboard.core.piece import Piece
from touchboard.core.placement import (
    STARTING_BOARD_FEN,
    Placement,
    placement_from_fen,
    placement_to_fen,
)
from touchboard.core.premove import mobility, premove_dests, rook_files_of
from touchboard.core.types import ALL_SQUARES, BOARD_SIZE, Square, parse_square

__all__ = [
    # Enums
    "Color",
    "Role",
    # Types
    "ALL_SQUARES",
    "BOARD_SIZE",
    "Piece",
    "Placement",
    "Square",
    "parse_square",
    # Notation
    "STARTING_BOARD_FEN",
    "placement_from_fen",
    "placement_to_fen",
    # Premoves
    "mobility",
    "premove_dests",
    "rook_files_of",
]
