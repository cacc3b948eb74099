"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from touchboard.board.config import BoardConfig

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication, QMainWindow

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from touchboard.ui.styles.theme import APP_STYLE

    app.setApplicationName("Touchboard")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def build_window(config: BoardConfig | None = None) -> QMainWindow:
    """Main window with a free-play board in the starting position."""
    from PyQt6.QtWidgets import QMainWindow

    from touchboard.ui.board.board_view import BoardView
    from touchboard.ui.free_play import FreePlayController

    window = QMainWindow()
    window.setWindowTitle("Touchboard")
    view = BoardView(config, parent=window)
    window.setCentralWidget(view)

    controller = FreePlayController(view.board_scene, window)
    controller.state_changed.connect(
        lambda state: window.statusBar().showMessage(f"{state.turn_color} to move")
    )
    controller.new_game()
    window.resize(720, 740)
    return window


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = build_window()
    window.show()
    _LOGGER.info("Board window shown")

    return app.exec()
