"""Piece value object."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from touchboard.core.enums import Color, Role

# FEN character ↔ (Color, Role)
_CHAR_MAP: dict[str, tuple[Color, Role]] = {
    "P": (Color.WHITE, Role.PAWN),
    "N": (Color.WHITE, Role.KNIGHT),
    "B": (Color.WHITE, Role.BISHOP),
    "R": (Color.WHITE, Role.ROOK),
    "Q": (Color.WHITE, Role.QUEEN),
    "K": (Color.WHITE, Role.KING),
    "p": (Color.BLACK, Role.PAWN),
    "n": (Color.BLACK, Role.KNIGHT),
    "b": (Color.BLACK, Role.BISHOP),
    "r": (Color.BLACK, Role.ROOK),
    "q": (Color.BLACK, Role.QUEEN),
    "k": (Color.BLACK, Role.KING),
}

_UNICODE: dict[tuple[Color, Role], str] = {
    (Color.WHITE, Role.PAWN): "♙",
    (Color.WHITE, Role.KNIGHT): "♘",
    (Color.WHITE, Role.BISHOP): "♗",
    (Color.WHITE, Role.ROOK): "♖",
    (Color.WHITE, Role.QUEEN): "♕",
    (Color.WHITE, Role.KING): "♔",
    (Color.BLACK, Role.PAWN): "♟",
    (Color.BLACK, Role.KNIGHT): "♞",
    (Color.BLACK, Role.BISHOP): "♝",
    (Color.BLACK, Role.ROOK): "♜",
    (Color.BLACK, Role.QUEEN): "♛",
    (Color.BLACK, Role.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, Role], str] = {v: k for k, v in _CHAR_MAP.items()}

_ids = itertools.count(1)


def next_piece_id() -> int:
    """Allocate a fresh piece identity."""
    return next(_ids)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece value.

    ``piece_id`` identifies one physical piece across moves so renderers can
    keep the same item for it; it takes no part in equality.
    """

    color: Color
    role: Role
    piece_id: int = field(default_factory=next_piece_id, compare=False)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.role)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, role = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, role)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.role)]
