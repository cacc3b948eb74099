"""Free-play host: applies board intents to a local board state."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from touchboard.board.state import BoardState, base_move, can_move_to, select_square
from touchboard.core.placement import STARTING_BOARD_FEN, placement_from_fen
from touchboard.core.types import Square
from touchboard.ui.board.board_scene import BoardScene

_LOGGER = logging.getLogger(__name__)


class FreePlayController(QObject):
    """Keeps a :class:`BoardState` and answers a scene's intents.

    Stands in for a real game layer: selections are applied as requested and
    proposed moves are played if the scene's own predicates accept them.

    Signals:
        state_changed(BoardState): Emitted after every applied intent.
    """

    state_changed = pyqtSignal(object)

    def __init__(self, scene: BoardScene, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._scene = scene
        self._state = BoardState()
        scene.square_selected.connect(self._on_square_selected)
        scene.move_proposed.connect(self._on_move_proposed)

    @property
    def state(self) -> BoardState:
        return self._state

    def new_game(self, fen: str = STARTING_BOARD_FEN) -> None:
        self._set_state(BoardState(pieces=placement_from_fen(fen)))

    def _on_square_selected(self, square: Square | None) -> None:
        self._set_state(select_square(self._state, self._scene.config, square))

    def _on_move_proposed(self, orig: Square, dest: Square, animate: bool) -> None:
        if not can_move_to(self._state, self._scene.config, orig, dest):
            _LOGGER.debug("Rejected proposed move %s -> %s", orig, dest)
            # put a dropped piece back where the state says it is
            self._scene.set_state(self._state)
            return
        _LOGGER.info("Move %s -> %s", orig, dest)
        self._set_state(base_move(self._state, orig, dest))

    def _set_state(self, state: BoardState) -> None:
        self._state = state
        self._scene.set_state(state)
        self.state_changed.emit(state)
