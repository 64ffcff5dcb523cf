from __future__ import annotations

import logging
import random
from time import monotonic
from typing import Callable

from esper import World

from lightsout.components.control_button import ControlAction
from lightsout.components.game_state import GameMode
from lightsout.constants import RANDOM_TOGGLE_COUNT, SUPPORTED_GRID_SIZES
from lightsout.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NEW_GAME_STARTED,
    EventBus,
)
from lightsout.systems.auto_solve_system import stop_auto_solve
from lightsout.systems.board_ops import all_lights_out, apply_random_toggles, lights_on_count
from lightsout.utils.game_state import get_game_state, set_control_enabled, set_game_mode, set_status
from lightsout.world import get_board

logger = logging.getLogger(__name__)


class PuzzleSystem:
    """Scrambles a fresh, winnable board whenever a new game is requested.

    The board is reached from the all-off state by random toggles, so undoing
    the recorded toggles always solves it. Scrambles that cancel out to an
    all-off board are thrown away and redone from scratch.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
        toggle_count: int = RANDOM_TOGGLE_COUNT,
    ):
        if toggle_count <= 0:
            raise ValueError("toggle_count must be positive")
        self.world = world
        self.event_bus = event_bus
        self.rng = rng or random.Random()
        self._clock = clock or monotonic
        self.toggle_count = toggle_count
        event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)

    def on_new_game_request(self, sender, **kwargs):
        rows = kwargs.get('rows')
        cols = kwargs.get('cols')
        if rows is None or cols is None:
            return
        self.new_game(int(rows), int(cols))

    def new_game(self, rows: int, cols: int) -> None:
        if rows not in SUPPORTED_GRID_SIZES or cols not in SUPPORTED_GRID_SIZES:
            raise ValueError(f"unsupported grid size {rows}x{cols}")
        stop_auto_solve(self.world, self.event_bus, reason="new_game")

        _, grid, history = get_board(self.world)
        grid.reset(rows, cols)
        attempts = 0
        while all_lights_out(grid):
            attempts += 1
            grid.reset(rows, cols)
            history.clear()
            apply_random_toggles(grid, history, self.toggle_count, self.rng)

        state = get_game_state(self.world)
        state.started_at = self._clock()
        state.solve_seconds = None
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        set_status(self.world, self.event_bus, "")
        set_control_enabled(self.world, self.event_bus, ControlAction.AUTO_SOLVE, True)

        if attempts > 1:
            logger.debug("Scramble cancelled out %d time(s); regenerated", attempts - 1)
        logger.info("New %dx%d game with %d lights on", rows, cols, lights_on_count(grid))
        self.event_bus.emit(
            EVENT_NEW_GAME_STARTED,
            rows=rows,
            cols=cols,
            toggles=len(history),
            attempts=attempts,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="new_game")
