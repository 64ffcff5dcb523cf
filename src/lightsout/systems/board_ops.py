from __future__ import annotations

import random
from typing import List, Tuple

from lightsout.components.light_grid import LightGrid
from lightsout.components.toggle_history import ToggleHistory

Position = Tuple[int, int]

# The pressed cell followed by its orthogonal neighbours.
TOGGLE_OFFSETS: Tuple[Position, ...] = ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1))


def toggle_positions(grid: LightGrid, row: int, col: int) -> List[Position]:
    """Return the in-bounds cells flipped by pressing ``(row, col)``."""
    positions: List[Position] = []
    for d_row, d_col in TOGGLE_OFFSETS:
        r, c = row + d_row, col + d_col
        if grid.in_bounds(r, c):
            positions.append((r, c))
    return positions


def toggle(grid: LightGrid, row: int, col: int) -> List[Position]:
    """Flip the light at ``(row, col)`` and each in-bounds orthogonal neighbour.

    Applying the same toggle twice restores the previous state. Returns the
    flipped positions.
    """
    if not grid.in_bounds(row, col):
        raise ValueError(f"toggle target {(row, col)} outside {grid.rows}x{grid.cols} grid")
    positions = toggle_positions(grid, row, col)
    for r, c in positions:
        index = grid.index_of(r, c)
        grid.lights[index] = not grid.lights[index]
    return positions


def all_lights_out(grid: LightGrid) -> bool:
    return not any(grid.lights)


def lights_on_count(grid: LightGrid) -> int:
    return sum(1 for light in grid.lights if light)


def apply_random_toggles(
    grid: LightGrid,
    history: ToggleHistory,
    count: int,
    rng: random.Random,
) -> None:
    """Toggle ``count`` uniformly random cells, recording each in ``history``."""
    for _ in range(count):
        row = rng.randrange(grid.rows)
        col = rng.randrange(grid.cols)
        toggle(grid, row, col)
        history.record(row, col)
