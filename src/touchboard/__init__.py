"""Touch-friendly chessboard: premove hints and gesture interaction."""

__version__ = "0.1.0"
