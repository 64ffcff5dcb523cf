from __future__ import annotations

import logging
import math
from time import monotonic
from typing import Callable

from esper import World

from lightsout.components.game_state import GameMode
from lightsout.events.bus import EVENT_BOARD_CHANGED, EVENT_PUZZLE_SOLVED, EventBus
from lightsout.systems.auto_solve_system import stop_auto_solve
from lightsout.systems.board_ops import all_lights_out
from lightsout.utils.game_state import get_game_state, set_game_mode, set_status
from lightsout.world import get_board

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You win! Solved in {seconds} seconds"


class WinSystem:
    """Checks for the all-off board after every state-mutating move."""

    def __init__(self, world: World, event_bus: EventBus, *, clock: Callable[[], float] | None = None):
        self.world = world
        self.event_bus = event_bus
        self._clock = clock or monotonic
        event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)

    def on_board_changed(self, sender, **kwargs):
        self.check_for_win()

    def check_for_win(self) -> bool:
        """Return True when every light is off, recording the solve on first detection."""
        _, grid, history = get_board(self.world)
        if not all_lights_out(grid):
            return False
        state = get_game_state(self.world)
        if state.mode == GameMode.SOLVED:
            return True
        seconds = max(0, math.floor(self._clock() - state.started_at))
        state.solve_seconds = seconds
        stop_auto_solve(self.world, self.event_bus, reason="solved")
        set_game_mode(self.world, self.event_bus, GameMode.SOLVED)
        set_status(self.world, self.event_bus, WIN_MESSAGE.format(seconds=seconds))
        logger.info("Puzzle solved in %d seconds", seconds)
        self.event_bus.emit(EVENT_PUZZLE_SOLVED, seconds=seconds, moves=len(history))
        return True
