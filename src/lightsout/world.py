from __future__ import annotations

from esper import World

from lightsout.components.control_button import ControlAction, ControlButton
from lightsout.components.game_state import GameMode, GameState
from lightsout.components.light_grid import LightGrid
from lightsout.components.status_message import StatusMessage
from lightsout.components.toggle_history import ToggleHistory
from lightsout.constants import DEFAULT_GRID_SIZE
from lightsout.events.bus import EventBus

# (label, action) in display order.
CONTROL_BUTTONS = (
    ("New 3x3 Game", ControlAction.NEW_GAME_3X3),
    ("New 5x5 Game", ControlAction.NEW_GAME_5X5),
    ("Solve For Me", ControlAction.AUTO_SOLVE),
)


def create_world(
    event_bus: EventBus,
    *,
    rows: int = DEFAULT_GRID_SIZE,
    cols: int = DEFAULT_GRID_SIZE,
) -> World:
    """Build a world holding the game's singleton entities.

    The board starts all-off; a puzzle is only scrambled once the puzzle system
    handles a new game request.
    """
    world = World()

    world.create_entity(
        GameState(mode=GameMode.PLAYING),
        StatusMessage(),
    )
    world.create_entity(
        LightGrid(rows=rows, cols=cols),
        ToggleHistory(),
    )
    for order, (label, action) in enumerate(CONTROL_BUTTONS):
        world.create_entity(ControlButton(label=label, action=action, order=order))
    return world


def get_board(world: World) -> tuple[int, LightGrid, ToggleHistory]:
    for entity, (grid, history) in world.get_components(LightGrid, ToggleHistory):
        return entity, grid, history
    raise RuntimeError("LightGrid board entity not found")


def get_state_entity(world: World) -> int:
    for entity, _ in world.get_component(GameState):
        return entity
    raise RuntimeError("GameState entity not found")


def get_control(world: World, action: ControlAction) -> ControlButton | None:
    for _, button in world.get_component(ControlButton):
        if button.action == action:
            return button
    return None


def ordered_controls(world: World) -> list[ControlButton]:
    return sorted((button for _, button in world.get_component(ControlButton)), key=lambda b: b.order)
