"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFocusEvent, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from touchboard.board.config import BoardConfig
from touchboard.board.interaction import BoardRules
from touchboard.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene, handles scaling to fit the widget.

    Signals:
        square_selected(Square | None): Bubbled up from BoardScene.
        move_proposed(Square, Square, bool): Bubbled up from BoardScene.
    """

    square_selected = pyqtSignal(object)
    move_proposed = pyqtSignal(object, object, bool)

    def __init__(
        self,
        config: BoardConfig | None = None,
        rules: BoardRules | None = None,
        parent: QWidget | None = None,
    ) -> None:
        self._scene = BoardScene(config, rules)
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        # Bubble scene signals
        self._scene.square_selected.connect(self.square_selected.emit)
        self._scene.move_proposed.connect(self.move_proposed.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
        self._scene.refresh_layout()

    def focusOutEvent(self, event: QFocusEvent | None) -> None:
        # Losing focus mid-gesture means the release will never arrive
        if self._scene.gesture_active:
            self._scene.cancel_gesture()
        super().focusOutEvent(event)
