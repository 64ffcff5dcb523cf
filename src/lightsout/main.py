"""Entry point for the Lights Out puzzle.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from arcade import Window, run

from lightsout.constants import (
    BACKGROUND_COLOR,
    DEFAULT_GRID_SIZE,
    SUPPORTED_GRID_SIZES,
    UPDATE_RATE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from lightsout.events.bus import EVENT_MOUSE_PRESS, EVENT_NEW_GAME_REQUEST, EVENT_TICK, EventBus
from lightsout.systems.auto_solve_system import AutoSolveSystem
from lightsout.systems.board import BoardSystem
from lightsout.systems.input import InputSystem
from lightsout.systems.puzzle_system import PuzzleSystem
from lightsout.systems.render import RenderSystem
from lightsout.systems.win_system import WinSystem
from lightsout.world import create_world

logger = logging.getLogger(__name__)


class LightsOutWindow(Window):
    def __init__(self, grid_size: int = DEFAULT_GRID_SIZE):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(UPDATE_RATE)
        self.background_color = BACKGROUND_COLOR
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, rows=grid_size, cols=grid_size)

        # Win detection subscribes first so it sees each board change before anything reacts to it.
        self.win_system = WinSystem(self.world, self.event_bus)
        self.puzzle_system = PuzzleSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.auto_solve_system = AutoSolveSystem(self.world, self.event_bus)

        # Interface systems
        self.input_system = InputSystem(self.world, self.event_bus, self)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        self.event_bus.emit(EVENT_NEW_GAME_REQUEST, rows=grid_size, cols=grid_size)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lights Out puzzle")
    parser.add_argument(
        "--size",
        type=int,
        choices=SUPPORTED_GRID_SIZES,
        default=DEFAULT_GRID_SIZE,
        help="Board size of the first game",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Sequence[str] | None = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting Lights Out with a %dx%d board", args.size, args.size)
    window = LightsOutWindow(grid_size=args.size)
    run()


if __name__ == "__main__":
    main()
