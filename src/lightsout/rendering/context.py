from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from esper import World

from lightsout.components.control_button import ControlButton
from lightsout.components.status_message import StatusMessage
from lightsout.ui.layout import Rect, compute_board_geometry, compute_control_rects, compute_status_position
from lightsout.world import get_board, ordered_controls


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    rows: int
    cols: int
    cell_size: int
    board_left: float
    board_bottom: float
    lights: List[bool]
    controls: List[Tuple[ControlButton, Rect]] = field(default_factory=list)
    status_text: str = ""
    status_position: Tuple[float, float] = (0.0, 0.0)

    @property
    def board_width(self) -> float:
        return self.cell_size * self.cols

    @property
    def board_height(self) -> float:
        return self.cell_size * self.rows

    def cell_origin(self, row: int, col: int) -> Tuple[float, float]:
        """Bottom-left corner of the cell; row 0 is the top row on screen."""
        left = self.board_left + col * self.cell_size
        bottom = self.board_bottom + (self.rows - 1 - row) * self.cell_size
        return left, bottom


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    _, grid, _ = get_board(world)
    cell_size, board_left, board_bottom = compute_board_geometry(
        window_width, window_height, grid.rows, grid.cols
    )
    controls = ordered_controls(world)
    rects = compute_control_rects(window_width, window_height, len(controls))
    status_text = ""
    for _, status in world.get_component(StatusMessage):
        status_text = status.text
        break
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        rows=grid.rows,
        cols=grid.cols,
        cell_size=cell_size,
        board_left=board_left,
        board_bottom=board_bottom,
        lights=list(grid.lights),
        controls=list(zip(controls, rects)),
        status_text=status_text,
        status_position=compute_status_position(window_width, window_height),
    )
