from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from esper import World

from lightsout.components.light_grid import LightGrid
from lightsout.constants import RANDOM_TOGGLE_COUNT
from lightsout.events.bus import EVENT_NEW_GAME_REQUEST, EventBus
from lightsout.systems.auto_solve_system import AutoSolveSystem
from lightsout.systems.board import BoardSystem
from lightsout.systems.board_ops import Position, toggle
from lightsout.systems.input import InputSystem
from lightsout.systems.puzzle_system import PuzzleSystem
from lightsout.systems.render import RenderSystem
from lightsout.systems.win_system import WinSystem
from lightsout.world import create_world, get_board


class FakeClock:
    def __init__(self, value: float = 100.0) -> None:
        self.value = value

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


class ScriptedRandom:
    """Stand-in random source whose ``randrange`` replays a fixed script of values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)

    def randrange(self, *args, **kwargs) -> int:
        return self._values.pop(0)


@dataclass
class DummyWindow:
    width: int = 640
    height: int = 720


@dataclass
class GameHarness:
    world: World
    bus: EventBus
    clock: FakeClock
    window: DummyWindow
    win: WinSystem
    puzzle: PuzzleSystem
    board: BoardSystem
    auto_solve: AutoSolveSystem
    input: InputSystem
    render: RenderSystem

    @property
    def grid(self):
        return get_board(self.world)[1]

    @property
    def history(self):
        return get_board(self.world)[2]


def build_game(
    *,
    seed: int = 0,
    rows: int = 3,
    cols: int = 3,
    rng: random.Random | None = None,
    toggle_count: int = RANDOM_TOGGLE_COUNT,
    start: bool = True,
) -> GameHarness:
    """Wire every system the way the window does, against a headless renderer."""
    bus = EventBus()
    clock = FakeClock()
    window = DummyWindow()
    world = create_world(bus, rows=rows, cols=cols)
    harness = GameHarness(
        world=world,
        bus=bus,
        clock=clock,
        window=window,
        win=WinSystem(world, bus, clock=clock),
        puzzle=PuzzleSystem(world, bus, rng=rng or random.Random(seed), clock=clock, toggle_count=toggle_count),
        board=BoardSystem(world, bus),
        auto_solve=AutoSolveSystem(world, bus),
        input=InputSystem(world, bus, window),
        render=RenderSystem(world, bus, window, headless=True),
    )
    if start:
        bus.emit(EVENT_NEW_GAME_REQUEST, rows=rows, cols=cols)
    return harness


def capture(bus: EventBus, name: str) -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []

    def _capture(sender, **payload):
        received.append(payload)

    bus.subscribe(name, _capture)
    return received


def scripted_moves(moves: Sequence[tuple[int, int]]) -> ScriptedRandom:
    values: list[int] = []
    for row, col in moves:
        values.extend((row, col))
    return ScriptedRandom(values)


def replay_reversed(grid: LightGrid, moves: Iterable[Position]) -> None:
    """Undo ``moves`` by toggling them again from last to first."""
    for row, col in reversed(list(moves)):
        toggle(grid, row, col)
