"""Board interaction layer — geometry, state helpers and the gesture machine.

Quick start::

    from touchboard.board import (
        BoardConfig, BoardGeometry, BoardInteraction, BoardState, PointerGrant,
    )

    machine = BoardInteraction()
    machine.set_layout(BoardGeometry.square_board(0, 0, 320))
    transition = machine.handle(PointerGrant(170, 290), state, BoardConfig())
    for intent in transition.intents:
        ...
"""

from touchboard.board.config import BoardConfig, MovableColor
from touchboard.board.geometry import BoardGeometry, PixelOffset, pixel_of, square_at
from touchboard.board.interaction import (
    HIDDEN_SHADOW,
    BoardInteraction,
    BoardRules,
    DefaultRules,
    DraggedPiece,
    GestureEvent,
    Intent,
    PointerGrant,
    PointerMove,
    PointerRelease,
    PointerTerminate,
    ProposeMove,
    SelectSquare,
    Settle,
    Transition,
    VisualState,
)
from touchboard.board.state import (
    BoardState,
    Light,
    base_move,
    can_move,
    can_move_to,
    can_premove,
    compute_square_lights,
    is_draggable,
    is_movable,
    is_premovable,
    select_square,
)

__all__ = [
    # Configuration
    "BoardConfig",
    "MovableColor",
    # Geometry
    "BoardGeometry",
    "PixelOffset",
    "pixel_of",
    "square_at",
    # State
    "BoardState",
    "Light",
    "base_move",
    "can_move",
    "can_move_to",
    "can_premove",
    "compute_square_lights",
    "is_draggable",
    "is_movable",
    "is_premovable",
    "select_square",
    # Interaction
    "HIDDEN_SHADOW",
    "BoardInteraction",
    "BoardRules",
    "DefaultRules",
    "DraggedPiece",
    "GestureEvent",
    "Intent",
    "PointerGrant",
    "PointerMove",
    "PointerRelease",
    "PointerTerminate",
    "ProposeMove",
    "SelectSquare",
    "Settle",
    "Transition",
    "VisualState",
]
