"""Visual theme constants and QSS styles for the board window."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtGui import QColor

from touchboard.board.state import Light

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # selected piece origin
    move_dest: QColor  # legal move targets
    premove_dest: QColor  # premove targets
    check: QColor  # king in check
    last_move: QColor  # last move origin and destination
    shadow: QColor  # drop indicator under a dragged piece
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    def light_color(self, light: Light) -> QColor:
        return {
            Light.LAST_MOVE: self.last_move,
            Light.CHECK: self.check,
            Light.MOVE_DEST: self.move_dest,
            Light.PREMOVE_DEST: self.premove_dest,
            Light.SELECTED: self.selected,
        }[light]

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(20, 85, 30, 128),
            move_dest=QColor(20, 85, 30, 80),
            premove_dest=QColor(20, 30, 85, 80),
            check=QColor(255, 0, 0, 120),  # red transparent
            last_move=QColor(155, 199, 0, 105),  # green
            shadow=QColor(0, 0, 0, 51),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            selected=QColor(20, 85, 30, 128),
            move_dest=QColor(20, 85, 30, 80),
            premove_dest=QColor(20, 30, 85, 80),
            check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            shadow=QColor(0, 0, 0, 51),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            selected=QColor(255, 255, 0, 100),
            move_dest=QColor(0, 0, 0, 40),
            premove_dest=QColor(20, 30, 85, 80),
            check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            shadow=QColor(0, 0, 0, 51),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )


_THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Green": BoardTheme.green,
}


def theme_by_name(name: str) -> BoardTheme:
    """Resolve a theme name, falling back to the classic theme."""
    factory = _THEMES.get(name)
    if factory is None:
        _LOGGER.warning("Unknown board theme %r, using Classic", name)
        return BoardTheme.default()
    return factory()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QStatusBar {
    background: #2b2b2b;
    color: #d4d4d4;
}
"""
