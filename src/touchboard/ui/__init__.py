"""PyQt6 rendering layer for the board."""
