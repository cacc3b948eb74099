"""Pixel ↔ square mapping for a board drawn inside a rectangle."""

from __future__ import annotations

import math
from dataclasses import dataclass

from touchboard.core.enums import Color
from touchboard.core.types import BOARD_SIZE, Square


@dataclass(frozen=True, slots=True)
class PixelOffset:
    """A pixel position relative to some origin."""

    x: float
    y: float

    def __add__(self, other: PixelOffset) -> PixelOffset:
        return PixelOffset(self.x + other.x, self.y + other.y)

    def __sub__(self, other: PixelOffset) -> PixelOffset:
        return PixelOffset(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Bounding rectangle of the board view, in pointer coordinates.

    The board is square: the cell size is taken from the width.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Board size must be positive: {self.width!r}x{self.height!r}"
            )

    @classmethod
    def square_board(cls, x: float, y: float, size: float) -> BoardGeometry:
        return cls(x, y, size, size)

    @property
    def cell_size(self) -> float:
        return self.width / BOARD_SIZE

    def contains(self, px: float, py: float) -> bool:
        """Half-open containment: the right and bottom edges are outside."""
        return (
            self.x <= px < self.x + self.width and self.y <= py < self.y + self.height
        )


def square_at(
    px: float,
    py: float,
    geometry: BoardGeometry,
    orientation: Color = Color.WHITE,
) -> Square | None:
    """Board square under the pointer, or ``None`` off the board."""
    if not geometry.contains(px, py):
        return None
    if py - geometry.y >= geometry.width:
        # below the eighth row of a rectangle taller than it is wide
        return None
    cell = geometry.cell_size
    col = min(int(math.floor((px - geometry.x) / cell)), BOARD_SIZE - 1)
    row = min(int(math.floor((py - geometry.y) / cell)), BOARD_SIZE - 1)
    if orientation == Color.WHITE:
        return Square(col + 1, BOARD_SIZE - row)
    return Square(BOARD_SIZE - col, row + 1)


def pixel_of(
    square: Square,
    cell_size: float,
    orientation: Color = Color.WHITE,
) -> PixelOffset:
    """Top-left corner of *square*'s cell, relative to the board origin."""
    if orientation == Color.WHITE:
        col, row = square.file - 1, BOARD_SIZE - square.rank
    else:
        col, row = BOARD_SIZE - square.file, square.rank - 1
    return PixelOffset(col * cell_size, row * cell_size)
