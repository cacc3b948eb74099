"""Piece placement mapping and its FEN board-field notation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

from touchboard.core.piece import Piece
from touchboard.core.types import BOARD_SIZE, Square

Placement: TypeAlias = Mapping[Square, Piece]

STARTING_BOARD_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def placement_from_fen(fen: str) -> dict[Square, Piece]:
    """Parse the board field of a FEN string into a placement.

    A full FEN is accepted too; only its first field is read. Every piece
    gets a fresh identity.
    """
    fields = fen.split()
    if not fields:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    pieces: dict[Square, Piece] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - rank_idx
        file = 1
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file > BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                pieces[Square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > BOARD_SIZE + 1:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != BOARD_SIZE + 1:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return pieces


def placement_to_fen(placement: Placement) -> str:
    """Serialise a placement to the FEN board field."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE, 0, -1):
        empty = 0
        row = ""
        for file in range(1, BOARD_SIZE + 1):
            piece = placement.get(Square(file, rank))
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
