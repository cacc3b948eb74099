"""Tests for the application window builder."""

from __future__ import annotations

from touchboard.board.config import BoardConfig
from touchboard.core.enums import Color
from touchboard.ui.board.board_view import BoardView
from touchboard.ui.bootstrap import build_window


def test_window_shows_starting_position() -> None:
    window = build_window()
    view = window.centralWidget()
    assert isinstance(view, BoardView)
    assert len(view.board_scene.state.pieces) == 32
    assert view.board_scene.state.turn_color == Color.WHITE


def test_window_uses_given_config() -> None:
    config = BoardConfig(orientation=Color.BLACK)
    view = build_window(config).centralWidget()
    assert isinstance(view, BoardView)
    assert view.board_scene.config is config


def test_view_bubbles_scene_signals() -> None:
    view = BoardView()
    seen: list[object] = []
    view.square_selected.connect(seen.append)
    view.board_scene.square_selected.emit(None)
    assert seen == [None]
