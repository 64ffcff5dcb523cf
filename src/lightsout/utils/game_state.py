from __future__ import annotations

import logging

from esper import World

from lightsout.components.control_button import ControlAction, ControlButton
from lightsout.components.game_state import GameMode, GameState
from lightsout.components.status_message import StatusMessage
from lightsout.events.bus import (
    EVENT_CONTROL_STATE_CHANGED,
    EVENT_GAME_MODE_CHANGED,
    EVENT_STATUS_CHANGED,
    EventBus,
)

logger = logging.getLogger(__name__)


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState not found")


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""
    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return
    state.mode = mode
    logger.debug("Game mode %s -> %s", previous_mode.name, mode.name)
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)


def set_status(world: World, event_bus: EventBus, text: str) -> None:
    for _, status in world.get_component(StatusMessage):
        if status.text != text:
            status.text = text
            event_bus.emit(EVENT_STATUS_CHANGED, text=text)
        return
    raise RuntimeError("StatusMessage not found")


def set_control_enabled(world: World, event_bus: EventBus, action: ControlAction, enabled: bool) -> None:
    for _, button in world.get_component(ControlButton):
        if button.action != action:
            continue
        if button.enabled != enabled:
            button.enabled = enabled
            event_bus.emit(EVENT_CONTROL_STATE_CHANGED, action=action, enabled=enabled)
        return
