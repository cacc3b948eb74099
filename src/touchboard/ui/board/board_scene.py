"""BoardScene — QGraphicsScene that draws the board and drives gestures."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from touchboard.board.config import BoardConfig
from touchboard.board.geometry import BoardGeometry, pixel_of
from touchboard.board.interaction import (
    BoardInteraction,
    BoardRules,
    GestureEvent,
    PointerGrant,
    PointerMove,
    PointerRelease,
    PointerTerminate,
    ProposeMove,
    SelectSquare,
    Transition,
)
from touchboard.board.state import BoardState, compute_square_lights
from touchboard.core.types import ALL_SQUARES, Square
from touchboard.ui.board.piece_item import PieceItem
from touchboard.ui.styles.theme import BoardTheme, theme_by_name

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, lights, pieces and the drag shadow.

    Mouse events are fed to a :class:`BoardInteraction` as gestures; the
    resulting intents are re-emitted as signals and never applied here.

    Signals:
        square_selected(Square | None): Selection requested or cleared.
        move_proposed(Square, Square, bool): Origin, destination, animate.
    """

    square_selected = pyqtSignal(object)
    move_proposed = pyqtSignal(object, object, bool)

    TILE = 80  # px per square

    def __init__(
        self,
        config: BoardConfig | None = None,
        rules: BoardRules | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config if config is not None else BoardConfig()
        self._theme: BoardTheme = theme_by_name(self._config.board_theme)
        self._state = BoardState()
        self._interaction = BoardInteraction(rules)
        self._press_pos: QPointF | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._light_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[int, PieceItem] = {}  # keyed by piece id
        self._shadow = QGraphicsEllipseItem(0, 0, 2 * self.TILE, 2 * self.TILE)
        self._shadow.setPen(QPen(Qt.PenStyle.NoPen))
        self._shadow.setZValue(0.9)
        self.addItem(self._shadow)

        self._draw_board()
        self.refresh_layout()
        self._apply_shadow()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def interaction(self) -> BoardInteraction:
        return self._interaction

    def set_state(self, state: BoardState) -> None:
        """Display a new board state (pieces are matched by identity)."""
        self._state = state
        self._sync_pieces()
        self._sync_lights()

    def set_config(self, config: BoardConfig) -> None:
        """Apply new settings; any gesture in progress is dropped."""
        self._config = config
        self._theme = theme_by_name(config.board_theme)
        self._interaction.reset()
        self._draw_board()
        self._apply_shadow()
        self._sync_pieces()
        self._sync_lights()

    def refresh_layout(self) -> None:
        """Tell the gesture machine where the board lies in scene coords."""
        rect = self.sceneRect()
        self._interaction.set_layout(
            BoardGeometry(rect.x(), rect.y(), rect.width(), rect.height())
        )

    @property
    def gesture_active(self) -> bool:
        return self._press_pos is not None

    def piece_item(self, piece_id: int) -> PieceItem | None:
        return self._piece_items.get(piece_id)

    # ── Gestures ─────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.press_at(event.scenePos())
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or self._press_pos is None:
            return super().mouseMoveEvent(event)
        self.move_to(event.scenePos())
        event.accept()

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or self._press_pos is None:
            return super().mouseReleaseEvent(event)
        self.release_at(event.scenePos())
        event.accept()

    def press_at(self, pos: QPointF) -> Transition:
        if self._press_pos is not None:
            # a new press without a release: the previous gesture is lost
            self.cancel_gesture()
        self._press_pos = QPointF(pos)
        return self._dispatch(PointerGrant(pos.x(), pos.y()))

    def move_to(self, pos: QPointF) -> Transition:
        dx, dy = self._displacement(pos)
        return self._dispatch(PointerMove(pos.x(), pos.y(), dx, dy))

    def release_at(self, pos: QPointF) -> Transition:
        dx, dy = self._displacement(pos)
        self._press_pos = None
        return self._dispatch(PointerRelease(pos.x(), pos.y(), dx, dy))

    def cancel_gesture(self) -> Transition:
        """Abort the current gesture, e.g. when the view loses the grab."""
        self._press_pos = None
        return self._dispatch(PointerTerminate())

    def _displacement(self, pos: QPointF) -> tuple[float, float]:
        if self._press_pos is None:
            return 0.0, 0.0
        return pos.x() - self._press_pos.x(), pos.y() - self._press_pos.y()

    def _dispatch(self, event: GestureEvent) -> Transition:
        transition = self._interaction.handle(event, self._state, self._config)
        self._apply(transition)
        return transition

    def _apply(self, transition: Transition) -> None:
        dragged = transition.visual.dragged
        if dragged is not None:
            item = self._piece_items.get(dragged.piece.piece_id)
            if item is not None:
                if transition.restack:
                    item.lift()
                if dragged.offset is not None:
                    item.place(dragged.offset.x, dragged.offset.y, dragged.scale)

        if transition.shadow_changed:
            self._apply_shadow()

        settle = transition.settle
        if settle is not None:
            item = self._piece_items.get(settle.piece.piece_id)
            if item is not None:
                item.settle(settle.offset.x, settle.offset.y)

        # Intents last: a host may answer synchronously with set_state()
        for intent in transition.intents:
            if isinstance(intent, SelectSquare):
                self.square_selected.emit(intent.square)
            elif isinstance(intent, ProposeMove):
                self.move_proposed.emit(intent.orig, intent.dest, intent.animate)

    def _apply_shadow(self) -> None:
        shadow = self._interaction.visual.shadow
        self._shadow.setBrush(QBrush(self._theme.shadow))
        self._shadow.setPos(shadow.x, shadow.y)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 6))
        orientation = self._config.orientation

        for sq in ALL_SQUARES:
            pos = pixel_of(sq, t, orientation)
            is_dark = (sq.file + sq.rank) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(pos.x, pos.y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_brush = QBrush(
                self._theme.coord_dark if is_dark else self._theme.coord_light
            )
            # Rank numbers on the left edge, file letters along the bottom
            if pos.x == 0:
                txt = QGraphicsSimpleTextItem(str(sq.rank))
                txt.setFont(font)
                txt.setBrush(text_brush)
                txt.setPos(pos.x + 2, pos.y + 1)
                self._add_coord(txt)
            if pos.y == 7 * t:
                txt = QGraphicsSimpleTextItem(sq.name[0])
                txt.setFont(font)
                txt.setBrush(text_brush)
                txt.setPos(pos.x + t - 12, pos.y + t - 16)
                self._add_coord(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(self, item: QGraphicsSimpleTextItem) -> None:
        item.setZValue(0.3)
        item.setVisible(self._config.show_coordinates)
        self.addItem(item)
        self._coord_items.append(item)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Match piece items to the placement, reusing items by piece id."""
        t = self.TILE
        orientation = self._config.orientation
        dragging = self._interaction.dragging
        held_id = dragging[1].piece_id if dragging is not None else None

        stale = dict(self._piece_items)
        self._piece_items = {}
        for sq, piece in self._state.pieces.items():
            item = stale.pop(piece.piece_id, None)
            if item is None:
                item = PieceItem(piece, sq, t)
                self.addItem(item)
            item.square = sq
            self._piece_items[piece.piece_id] = item
            if piece.piece_id != held_id:
                pos = pixel_of(sq, t, orientation)
                item.settle(pos.x, pos.y)

        for item in stale.values():
            self.removeItem(item)
        _LOGGER.debug("Synced %d pieces", len(self._piece_items))

    def _sync_lights(self) -> None:
        for item in self._light_items:
            self.removeItem(item)
        self._light_items.clear()

        t = self.TILE
        lights = compute_square_lights(self._state, self._config)
        for sq, light in lights.items():
            pos = pixel_of(sq, t, self._config.orientation)
            rect = QGraphicsRectItem(pos.x, pos.y, t, t)
            rect.setBrush(QBrush(self._theme.light_color(light)))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0.5)
            self.addItem(rect)
            self._light_items.append(rect)
