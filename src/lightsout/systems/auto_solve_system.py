from __future__ import annotations

import logging

from esper import World

from lightsout.components.auto_solve_timer import AutoSolveTimer
from lightsout.components.control_button import ControlAction
from lightsout.components.game_state import GameMode
from lightsout.constants import AUTO_SOLVE_INTERVAL
from lightsout.events.bus import (
    EVENT_AUTO_SOLVE_REQUEST,
    EVENT_AUTO_SOLVE_STARTED,
    EVENT_AUTO_SOLVE_STOPPED,
    EVENT_BOARD_CHANGED,
    EVENT_LIGHTS_TOGGLED,
    EVENT_TICK,
    EventBus,
)
from lightsout.systems.board_ops import all_lights_out, toggle
from lightsout.utils.game_state import set_control_enabled, set_game_mode
from lightsout.world import get_board, get_control, get_state_entity

logger = logging.getLogger(__name__)


class AutoSolveError(RuntimeError):
    """Raised when the toggle history runs out before the board is dark."""


def active_timer(world: World) -> AutoSolveTimer | None:
    return world.try_component(get_state_entity(world), AutoSolveTimer)


def stop_auto_solve(world: World, event_bus: EventBus, reason: str) -> bool:
    """Cancel a running replay. Returns False when none was running."""
    state_entity = get_state_entity(world)
    if not world.has_component(state_entity, AutoSolveTimer):
        return False
    world.remove_component(state_entity, AutoSolveTimer)
    logger.info("Auto-solve stopped (%s)", reason)
    event_bus.emit(EVENT_AUTO_SOLVE_STOPPED, reason=reason)
    return True


class AutoSolveSystem:
    """Replays the toggle history backwards, one step per timer interval."""

    def __init__(self, world: World, event_bus: EventBus, *, interval: float = AUTO_SOLVE_INTERVAL):
        if interval <= 0:
            raise ValueError("auto-solve interval must be positive")
        self.world = world
        self.event_bus = event_bus
        self.interval = interval
        event_bus.subscribe(EVENT_AUTO_SOLVE_REQUEST, self.on_auto_solve_request)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def running(self) -> bool:
        return active_timer(self.world) is not None

    def on_auto_solve_request(self, sender, **kwargs):
        self.start()

    def start(self) -> bool:
        if self.running:
            logger.warning("Auto-solve already running; request ignored")
            return False
        control = get_control(self.world, ControlAction.AUTO_SOLVE)
        if control is not None and not control.enabled:
            return False
        set_control_enabled(self.world, self.event_bus, ControlAction.AUTO_SOLVE, False)
        _, grid, history = get_board(self.world)
        if all_lights_out(grid):
            # Nothing to replay; the control stays disabled until the next new game.
            return False
        self.world.add_component(get_state_entity(self.world), AutoSolveTimer(interval=self.interval))
        set_game_mode(self.world, self.event_bus, GameMode.AUTO_SOLVING)
        logger.info("Auto-solve started with %d moves to undo", len(history))
        self.event_bus.emit(EVENT_AUTO_SOLVE_STARTED, remaining=len(history))
        return True

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt')
        if dt is None:
            return
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        timer = active_timer(self.world)
        if timer is None:
            return
        timer.elapsed += dt
        while timer.elapsed >= timer.interval:
            timer.elapsed -= timer.interval
            self.step()
            if active_timer(self.world) is not timer:
                break

    def step(self) -> None:
        """Undo the most recent toggle, or stop once the board is dark."""
        _, grid, history = get_board(self.world)
        if all_lights_out(grid):
            stop_auto_solve(self.world, self.event_bus, reason="solved")
            return
        if not len(history):
            stop_auto_solve(self.world, self.event_bus, reason="history_exhausted")
            set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
            raise AutoSolveError("toggle history exhausted before the board was solved")
        row, col = history.pop()
        positions = toggle(grid, row, col)
        logger.debug("Auto-solve undid (%d, %d); %d moves left", row, col, len(history))
        self.event_bus.emit(
            EVENT_LIGHTS_TOGGLED,
            row=row,
            col=col,
            positions=positions,
            source="auto_solve",
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="auto_solve")
