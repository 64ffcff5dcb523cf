from __future__ import annotations

import logging

from esper import World

from lightsout.components.control_button import ControlAction
from lightsout.constants import LARGE_GRID_SIZE, SMALL_GRID_SIZE
from lightsout.events.bus import (
    EVENT_AUTO_SOLVE_REQUEST,
    EVENT_CELL_CLICK,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EventBus,
)
from lightsout.ui.layout import cell_at_point, compute_control_rects, point_in_rect
from lightsout.world import get_board, ordered_controls

logger = logging.getLogger(__name__)

# arcade.MOUSE_BUTTON_LEFT
LEFT_BUTTON = 1


class InputSystem:
    """Turns raw mouse presses into control actions and cell clicks."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        if self._handle_control_press(x, y):
            return
        _, grid, _ = get_board(self.world)
        cell = cell_at_point(x, y, self.window.width, self.window.height, grid.rows, grid.cols)
        if cell is not None:
            row, col = cell
            self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def _handle_control_press(self, x: float, y: float) -> bool:
        controls = ordered_controls(self.world)
        rects = compute_control_rects(self.window.width, self.window.height, len(controls))
        for control, rect in zip(controls, rects):
            if not point_in_rect(x, y, rect):
                continue
            if control.enabled:
                self._activate(control.action)
            # Presses on a disabled control are swallowed rather than falling through to the board.
            return True
        return False

    def _activate(self, action: ControlAction) -> None:
        logger.debug("Control activated: %s", action.name)
        if action == ControlAction.NEW_GAME_3X3:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST, rows=SMALL_GRID_SIZE, cols=SMALL_GRID_SIZE)
        elif action == ControlAction.NEW_GAME_5X5:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST, rows=LARGE_GRID_SIZE, cols=LARGE_GRID_SIZE)
        elif action == ControlAction.AUTO_SOLVE:
            self.event_bus.emit(EVENT_AUTO_SOLVE_REQUEST)
