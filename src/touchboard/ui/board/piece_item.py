"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from touchboard.core.piece import Piece
from touchboard.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *square*. Position and scale are driven entirely by
    the board scene; the item never moves itself.
    """

    _GLYPH_RATIO = 0.8

    def __init__(self, piece: Piece, square: Square, tile_size: int) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square

        self.setBrush(QBrush(QColor(20, 20, 20)))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(1)

        font = QFont()
        font.setPixelSize(max(int(tile_size * self._GLYPH_RATIO), 1))
        self.setFont(font)
        # scale around the middle of the cell, like a finger-held piece
        self.setTransformOriginPoint(tile_size / 2, tile_size / 2)

    def lift(self) -> None:
        """Bring above static pieces while held."""
        self.setZValue(10)
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))

    def place(self, x: float, y: float, scale: float = 1.0) -> None:
        self.setPos(QPointF(x, y))
        self.setScale(scale)

    def settle(self, x: float, y: float) -> None:
        """Put down at (x, y) at natural size."""
        self.place(x, y)
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

