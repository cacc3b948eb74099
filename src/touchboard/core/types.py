"""Square value type and coordinate helpers.

Files and ranks are both 1-based::

    a1 = (1, 1), h1 = (8, 1)
    a8 = (1, 8), h8 = (8, 8)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (1 <= self.file <= BOARD_SIZE and 1 <= self.rank <= BOARD_SIZE):
            raise ValueError(f"Square out of range: ({self.file!r}, {self.rank!r})")

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(5, 4)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]) + 1, int(name[1]))

    @property
    def name(self) -> str:
        """Human-readable name, e.g. Square(1, 1) → 'a1'."""
        return f"{_FILES[self.file - 1]}{self.rank}"

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Square:
    return Square.parse(name)


# Rank-major, a1 first.
ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank)
    for rank in range(1, BOARD_SIZE + 1)
    for file in range(1, BOARD_SIZE + 1)
)
