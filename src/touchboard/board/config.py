"""Board configuration knobs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from touchboard.core.enums import Color


class MovableColor(IntEnum):
    """Which side the local user may move."""

    WHITE = 0
    BLACK = 1
    BOTH = 2
    NONE = 3

    def allows(self, color: Color) -> bool:
        if self == MovableColor.BOTH:
            return True
        if self == MovableColor.NONE:
            return False
        return int(self) == int(color)


@dataclass
class BoardConfig:
    """All user-configurable board behaviour."""

    # Orientation
    orientation: Color = Color.WHITE

    # Moves
    movable_color: MovableColor = MovableColor.BOTH
    free_moves: bool = True  # any destination, ignoring the dests map
    show_dests: bool = True

    # Premoves
    premoves_enabled: bool = True
    castle_premoves: bool = True

    # Dragging
    drag_enabled: bool = True
    drag_scale: float = 2.0  # dragged piece grows under the finger

    # Rendering
    show_coordinates: bool = True
    board_theme: str = "Classic"
