from __future__ import annotations

import logging

from esper import World

from lightsout.events.bus import EVENT_BOARD_CHANGED, EVENT_CELL_CLICK, EVENT_LIGHTS_TOGGLED, EventBus
from lightsout.systems.auto_solve_system import active_timer
from lightsout.systems.board_ops import all_lights_out, toggle
from lightsout.world import get_board

logger = logging.getLogger(__name__)


class BoardSystem:
    """Applies player clicks to the light grid."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def on_cell_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.click_light(row, col)

    def click_light(self, row: int, col: int) -> bool:
        """Toggle around ``(row, col)`` and record the move. Returns False if ignored."""
        _, grid, history = get_board(self.world)
        # Ignore once the game is won or while the auto-solver owns the board
        if all_lights_out(grid) or active_timer(self.world) is not None:
            return False
        if not grid.in_bounds(row, col):
            return False
        positions = toggle(grid, row, col)
        history.record(row, col)
        logger.debug("Clicked (%d, %d); toggled %d lights", row, col, len(positions))
        self.event_bus.emit(EVENT_LIGHTS_TOGGLED, row=row, col=col, positions=positions, source="click")
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="click")
        return True
