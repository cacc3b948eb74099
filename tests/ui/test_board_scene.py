"""Tests for BoardScene gesture wiring and rendering sync."""

from __future__ import annotations

import logging

import pytest
from PyQt6.QtCore import QPointF

from touchboard.board.config import BoardConfig
from touchboard.board.geometry import BoardGeometry, pixel_of
from touchboard.board.interaction import HIDDEN_SHADOW, ProposeMove, SelectSquare
from touchboard.board.state import BoardState
from touchboard.core.enums import Color
from touchboard.core.placement import STARTING_BOARD_FEN, placement_from_fen
from touchboard.core.types import parse_square as sq
from touchboard.ui.board.board_scene import BoardScene
from touchboard.ui.styles.theme import BoardTheme, theme_by_name

T = BoardScene.TILE


def _centre(name: str, orientation: Color = Color.WHITE) -> QPointF:
    pos = pixel_of(sq(name), T, orientation)
    return QPointF(pos.x + T / 2, pos.y + T / 2)


def _scene(state: BoardState | None = None, **config: object) -> BoardScene:
    scene = BoardScene(BoardConfig(**config))
    scene.set_state(
        state
        if state is not None
        else BoardState(pieces=placement_from_fen(STARTING_BOARD_FEN))
    )
    return scene


class TestDrawing:
    def test_layout_matches_scene_rect(self) -> None:
        scene = BoardScene()
        assert scene.interaction.layout == BoardGeometry(0, 0, 8 * T, 8 * T)
        assert len(scene._square_items) == 64

    def test_shadow_starts_hidden(self) -> None:
        scene = BoardScene()
        assert scene._shadow.pos().x() == HIDDEN_SHADOW.x
        assert scene._shadow.pos().y() == HIDDEN_SHADOW.y

    def test_coordinates_follow_config(self) -> None:
        scene = BoardScene()
        assert len(scene._coord_items) == 16
        assert all(item.isVisible() for item in scene._coord_items)

        scene.set_config(BoardConfig(show_coordinates=False))
        assert all(not item.isVisible() for item in scene._coord_items)

    def test_pieces_placed_on_their_squares(self) -> None:
        scene = _scene()
        king = scene.state.pieces[sq("e1")]
        item = scene.piece_item(king.piece_id)
        assert item is not None
        expected = pixel_of(sq("e1"), T)
        assert (item.pos().x(), item.pos().y()) == (expected.x, expected.y)

    def test_flipped_board(self) -> None:
        scene = _scene(orientation=Color.BLACK)
        king = scene.state.pieces[sq("e1")]
        item = scene.piece_item(king.piece_id)
        assert item is not None
        expected = pixel_of(sq("e1"), T, Color.BLACK)
        assert (item.pos().x(), item.pos().y()) == (expected.x, expected.y)


class TestGestures:
    def test_press_emits_selection_and_lifts_piece(self) -> None:
        scene = _scene()
        seen: list[object] = []
        scene.square_selected.connect(seen.append)

        t = scene.press_at(_centre("e2"))

        assert seen == [sq("e2")]
        assert t.restack
        pawn = scene.state.pieces[sq("e2")]
        item = scene.piece_item(pawn.piece_id)
        assert item is not None
        assert item.zValue() == 10
        assert scene.gesture_active

    def test_move_positions_piece_and_shadow(self) -> None:
        scene = _scene()
        scene.press_at(_centre("e2"))
        target = _centre("e4")
        scene.move_to(target)

        pawn = scene.state.pieces[sq("e2")]
        item = scene.piece_item(pawn.piece_id)
        assert item is not None
        assert item.pos().x() == target.x() - T / 2
        assert item.pos().y() == target.y() - T
        assert item.scale() == 2.0

        shadow = pixel_of(sq("e4"), T)
        assert scene._shadow.pos().x() == shadow.x - T / 2
        assert scene._shadow.pos().y() == shadow.y - T / 2

    def test_release_emits_move(self) -> None:
        scene = _scene()
        moves: list[tuple[object, object, bool]] = []
        scene.move_proposed.connect(lambda o, d, a: moves.append((o, d, a)))
        # no host: apply the selection by hand
        scene.square_selected.connect(
            lambda s: scene.set_state(
                BoardState(pieces=scene.state.pieces, selected=s)
            )
        )

        scene.press_at(_centre("e2"))
        scene.move_to(_centre("e4"))
        t = scene.release_at(_centre("e4"))

        assert t.intents == (ProposeMove(sq("e2"), sq("e4"), animate=False),)
        assert moves == [(sq("e2"), sq("e4"), False)]
        assert not scene.gesture_active
        assert scene._shadow.pos().x() == HIDDEN_SHADOW.x

    def test_cancel_gesture_snaps_back(self) -> None:
        scene = _scene()
        scene.press_at(_centre("e2"))
        scene.move_to(_centre("e5"))
        t = scene.cancel_gesture()

        assert t.intents == ()
        pawn = scene.state.pieces[sq("e2")]
        item = scene.piece_item(pawn.piece_id)
        assert item is not None
        home = pixel_of(sq("e2"), T)
        assert (item.pos().x(), item.pos().y()) == (home.x, home.y)
        assert item.scale() == 1.0
        assert item.zValue() == 1
        assert scene._shadow.pos().y() == HIDDEN_SHADOW.y

    def test_press_off_piece_clears_selection(self) -> None:
        scene = _scene()
        seen: list[object] = []
        scene.square_selected.connect(seen.append)
        t = scene.press_at(_centre("e4"))
        assert t.intents == (SelectSquare(None),)
        assert seen == [None]


def test_lights_drawn_for_selection() -> None:
    pieces = placement_from_fen(STARTING_BOARD_FEN)
    scene = _scene(BoardState(pieces=pieces, selected=sq("e2")))
    assert len(scene._light_items) == 1


def test_piece_items_reused_by_identity() -> None:
    scene = _scene()
    pawn = scene.state.pieces[sq("e2")]
    item = scene.piece_item(pawn.piece_id)

    pieces = dict(scene.state.pieces)
    pieces[sq("e4")] = pieces.pop(sq("e2"))
    scene.set_state(BoardState(pieces=pieces))

    assert scene.piece_item(pawn.piece_id) is item
    assert item is not None and item.square == sq("e4")


def test_unknown_theme_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        theme = theme_by_name("Neon")
    assert theme == BoardTheme.default()
    assert "Neon" in caplog.text
