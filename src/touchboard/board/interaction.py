"""Gesture → board intent state machine.

A single pointer gesture arrives as one :class:`PointerGrant`, any number of
:class:`PointerMove` events and exactly one :class:`PointerRelease` or
:class:`PointerTerminate`. :class:`BoardInteraction` turns that stream into

* intents for the game layer (:class:`SelectSquare`, :class:`ProposeMove`),
  which the host applies or rejects, and
* a declarative :class:`VisualState` (dragged piece offset, shadow offset)
  plus one-shot directives, for whatever draws the board.

The machine never mutates :class:`~touchboard.board.state.BoardState`; it
only reads it. Its own fields (the dragged piece, the square under the
pointer, the previous selection) are private and change only inside
:meth:`BoardInteraction.handle`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeAlias

from touchboard.board import state as board_state
from touchboard.board.config import BoardConfig
from touchboard.board.geometry import BoardGeometry, PixelOffset, pixel_of, square_at
from touchboard.board.state import BoardState
from touchboard.core.piece import Piece
from touchboard.core.types import Square

_LOGGER = logging.getLogger(__name__)

# Off-screen parking spot for the shadow while nothing is dragged over.
HIDDEN_SHADOW = PixelOffset(999_999.0, 999_999.0)


# ── Collaborator interface ──────────────────────────────────────────────────


class BoardRules(ABC):
    """Predicates the board asks the game layer before acting."""

    @abstractmethod
    def is_movable(self, state: BoardState, config: BoardConfig, sq: Square) -> bool:
        """May the piece on *sq* be selected?"""

    @abstractmethod
    def is_draggable(
        self, state: BoardState, config: BoardConfig, sq: Square
    ) -> bool:
        """May the piece on *sq* be dragged?"""

    @abstractmethod
    def can_move_to(
        self, state: BoardState, config: BoardConfig, orig: Square, dest: Square
    ) -> bool:
        """Is *orig* → *dest* worth proposing?"""


class DefaultRules(BoardRules):
    """Rules backed by :mod:`touchboard.board.state`."""

    def is_movable(self, state: BoardState, config: BoardConfig, sq: Square) -> bool:
        return board_state.is_movable(state, config, sq)

    def is_draggable(
        self, state: BoardState, config: BoardConfig, sq: Square
    ) -> bool:
        return board_state.is_draggable(state, config, sq)

    def can_move_to(
        self, state: BoardState, config: BoardConfig, orig: Square, dest: Square
    ) -> bool:
        return board_state.can_move_to(state, config, orig, dest)


# ── Gesture events ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PointerGrant:
    """Pointer went down at (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PointerMove:
    """Pointer is at (x, y), (dx, dy) away from where the gesture began."""

    x: float
    y: float
    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True, slots=True)
class PointerRelease:
    """Pointer lifted at (x, y); (dx, dy) is the net gesture displacement."""

    x: float
    y: float
    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True, slots=True)
class PointerTerminate:
    """The system took the gesture away."""


GestureEvent: TypeAlias = PointerGrant | PointerMove | PointerRelease | PointerTerminate


# ── Intents ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SelectSquare:
    """Select *square*, or clear the selection when it is ``None``."""

    square: Square | None


@dataclass(frozen=True, slots=True)
class ProposeMove:
    """Ask the game layer to play *orig* → *dest*."""

    orig: Square
    dest: Square
    animate: bool = True


Intent: TypeAlias = SelectSquare | ProposeMove


# ── Visual snapshots ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class DraggedPiece:
    """The piece held under the pointer.

    ``offset`` is the piece's top-left corner relative to the board origin,
    or ``None`` while it still sits on its square (no move event yet).
    """

    square: Square
    piece: Piece
    offset: PixelOffset | None = None
    scale: float = 1.0


@dataclass(frozen=True, slots=True)
class VisualState:
    dragged: DraggedPiece | None = None
    shadow: PixelOffset = HIDDEN_SHADOW

    @property
    def shadow_visible(self) -> bool:
        return self.shadow != HIDDEN_SHADOW


@dataclass(frozen=True, slots=True)
class Settle:
    """Where a released piece comes to rest.

    Attributes:
        square: Square the piece was picked up from.
        piece: The dragged piece.
        offset: Resting top-left corner relative to the board origin.
        cancelled: ``True`` when the piece snaps back to *square*.
    """

    square: Square
    piece: Piece
    offset: PixelOffset
    cancelled: bool


@dataclass(frozen=True, slots=True)
class Transition:
    """Outcome of one gesture event.

    Attributes:
        intents: Intents for the game layer, in emission order.
        visual: Visual snapshot after the event.
        restack: A drag just started; redraw now so the dragged piece is
            stacked above the others before the next move event.
        shadow_changed: The shadow position differs from the previous one.
        settle: Final resting place of a piece whose drag just ended.
    """

    intents: tuple[Intent, ...]
    visual: VisualState
    restack: bool = False
    shadow_changed: bool = False
    settle: Settle | None = None


# ── State machine ───────────────────────────────────────────────────────────


class BoardInteraction:
    """Interprets pointer gestures over the board."""

    __slots__ = (
        "_rules",
        "_layout",
        "_dragging",
        "_drag_offset",
        "_drag_scale",
        "_drag_over",
        "_previously_selected",
        "_shadow",
    )

    def __init__(self, rules: BoardRules | None = None) -> None:
        self._rules: BoardRules = rules if rules is not None else DefaultRules()
        self._layout: BoardGeometry | None = None

        # (square, piece) held under the pointer; None when not dragging
        self._dragging: tuple[Square, Piece] | None = None
        self._drag_offset: PixelOffset | None = None
        self._drag_scale = 1.0

        # square under the pointer during a drag, None if off the board
        self._drag_over: Square | None = None

        # tapping the selected square again deselects it, so remember what
        # was selected before the grant re-selected it
        self._previously_selected: Square | None = None

        self._shadow = HIDDEN_SHADOW

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def layout(self) -> BoardGeometry | None:
        return self._layout

    @property
    def dragging(self) -> tuple[Square, Piece] | None:
        return self._dragging

    @property
    def drag_over(self) -> Square | None:
        return self._drag_over

    @property
    def previously_selected(self) -> Square | None:
        return self._previously_selected

    @property
    def visual(self) -> VisualState:
        dragged = None
        if self._dragging is not None:
            sq, piece = self._dragging
            dragged = DraggedPiece(sq, piece, self._drag_offset, self._drag_scale)
        return VisualState(dragged, self._shadow)

    # ── Public API ───────────────────────────────────────────────────────

    def set_layout(self, geometry: BoardGeometry) -> None:
        """Record the board's current bounding rectangle."""
        self._layout = geometry

    def reset(self) -> None:
        """Forget any gesture in progress, without emitting anything."""
        self._dragging = None
        self._drag_offset = None
        self._drag_scale = 1.0
        self._drag_over = None
        self._previously_selected = None
        self._shadow = HIDDEN_SHADOW

    def square_at(self, x: float, y: float, config: BoardConfig) -> Square | None:
        if self._layout is None:
            _LOGGER.debug("Pointer at (%s, %s) before any layout", x, y)
            return None
        return square_at(x, y, self._layout, config.orientation)

    def handle(
        self, event: GestureEvent, state: BoardState, config: BoardConfig
    ) -> Transition:
        """Advance the machine by one gesture event."""
        if isinstance(event, PointerGrant):
            return self._on_grant(event, state, config)
        if isinstance(event, PointerMove):
            return self._on_move(event, config)
        if isinstance(event, PointerRelease):
            return self._on_release(event, state, config)
        if isinstance(event, PointerTerminate):
            return self._on_terminate(config)
        raise TypeError(f"Unknown gesture event: {event!r}")

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_grant(
        self, event: PointerGrant, state: BoardState, config: BoardConfig
    ) -> Transition:
        key = self.square_at(event.x, event.y, config)
        if key is None:
            return self._transition()

        rules = self._rules
        sel = state.selected
        piece = state.pieces.get(key)

        # a piece that can move: select it, and pick it up when allowed
        if piece is not None and rules.is_movable(state, config, key):
            self._previously_selected = sel
            restack = False
            if rules.is_draggable(state, config, key):
                self._dragging = (key, piece)
                self._drag_offset = None
                self._drag_scale = 1.0
                restack = True
                _LOGGER.debug("Drag started from %s", key)
            return self._transition((SelectSquare(key),), restack=restack)

        # otherwise move the selected piece here, or drop the selection
        if (
            sel is not None
            and state.pieces.get(sel) is not None
            and rules.can_move_to(state, config, sel, key)
        ):
            return self._transition((ProposeMove(sel, key),))
        return self._transition((SelectSquare(None),))

    def _on_move(self, event: PointerMove, config: BoardConfig) -> Transition:
        if self._dragging is None or self._layout is None:
            return self._transition()

        layout = self._layout
        cell = layout.cell_size
        # centred horizontally and lifted one cell above the finger
        self._drag_offset = PixelOffset(
            event.x - layout.x - cell / 2,
            event.y - layout.y - cell,
        )
        self._drag_scale = config.drag_scale

        prev = self._drag_over
        self._drag_over = self.square_at(event.x, event.y, config)
        if self._drag_over == prev:
            return self._transition()
        self._shadow = self._shadow_for(self._drag_over, config)
        return self._transition(shadow_changed=True)

    def _on_release(
        self, event: PointerRelease, state: BoardState, config: BoardConfig
    ) -> Transition:
        orig = state.selected
        dest = self._drag_over
        self._drag_over = None
        shadow_changed = self._hide_shadow()

        if self._dragging is None or orig is None:
            return self._transition(
                shadow_changed=shadow_changed, settle=self._cancel_drag(config)
            )

        intents: list[Intent] = []
        if dest is None:
            settle = self._cancel_drag(config)
        elif self._rules.can_move_to(state, config, orig, dest):
            settle = self._drop(dest, config)
            intents.append(ProposeMove(orig, dest, animate=False))
        else:
            _LOGGER.debug("Drop %s -> %s refused", orig, dest)
            settle = self._cancel_drag(config)

        # TODO: add a configurable movement threshold for taps
        has_moved = event.dx != 0 or event.dy != 0
        if self._previously_selected == orig and not has_moved:
            intents.append(SelectSquare(None))

        return self._transition(
            tuple(intents), shadow_changed=shadow_changed, settle=settle
        )

    def _on_terminate(self, config: BoardConfig) -> Transition:
        self._drag_over = None
        shadow_changed = self._hide_shadow()
        return self._transition(
            shadow_changed=shadow_changed, settle=self._cancel_drag(config)
        )

    # ── Helpers ──────────────────────────────────────────────────────────

    def _transition(
        self,
        intents: tuple[Intent, ...] = (),
        *,
        restack: bool = False,
        shadow_changed: bool = False,
        settle: Settle | None = None,
    ) -> Transition:
        return Transition(intents, self.visual, restack, shadow_changed, settle)

    def _cell_size(self) -> float:
        return self._layout.cell_size if self._layout is not None else 0.0

    def _shadow_for(self, sq: Square | None, config: BoardConfig) -> PixelOffset:
        if sq is None:
            return HIDDEN_SHADOW
        cell = self._cell_size()
        pos = pixel_of(sq, cell, config.orientation)
        return pos - PixelOffset(cell / 2, cell / 2)

    def _hide_shadow(self) -> bool:
        changed = self._shadow != HIDDEN_SHADOW
        self._shadow = HIDDEN_SHADOW
        return changed

    def _end_drag(
        self, square: Square, cancelled: bool, config: BoardConfig
    ) -> Settle:
        assert self._dragging is not None
        origin, piece = self._dragging
        self._dragging = None
        self._drag_offset = None
        self._drag_scale = 1.0
        offset = pixel_of(square, self._cell_size(), config.orientation)
        return Settle(origin, piece, offset, cancelled)

    def _cancel_drag(self, config: BoardConfig) -> Settle | None:
        """Snap the dragged piece, if any, back onto its own square."""
        if self._dragging is None:
            return None
        return self._end_drag(self._dragging[0], True, config)

    def _drop(self, dest: Square, config: BoardConfig) -> Settle:
        return self._end_drag(dest, False, config)
