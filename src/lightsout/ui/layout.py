from __future__ import annotations

from typing import List, Tuple

from lightsout.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    CONTROL_BUTTON_GAP,
    CONTROL_BUTTON_HEIGHT,
    CONTROL_BUTTON_WIDTH,
    CONTROL_TOP_MARGIN,
    MIN_CELL_SIZE,
    STATUS_GAP,
)

Rect = Tuple[float, float, float, float]  # left, bottom, width, height


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int):
    """Return (cell_size, start_x, start_y) for a rows x cols board.

    Shared by rendering and input so clicks map onto exactly the drawn cells.
    Row 0 is the top row on screen.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_size = int(min(max_board_w / cols, max_board_h / rows))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    start_x = (window_width - cols * cell_size) / 2
    start_y = BOTTOM_MARGIN
    return cell_size, start_x, start_y


def cell_at_point(
    x: float,
    y: float,
    window_width: int,
    window_height: int,
    rows: int,
    cols: int,
) -> Tuple[int, int] | None:
    cell_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    if x < start_x or x >= start_x + cols * cell_size:
        return None
    if y < start_y or y >= start_y + rows * cell_size:
        return None
    col = int((x - start_x) // cell_size)
    # Screen y grows upwards; row 0 is drawn at the top.
    row = rows - 1 - int((y - start_y) // cell_size)
    if 0 <= row < rows and 0 <= col < cols:
        return row, col
    return None


def cell_rect(window_width: int, window_height: int, rows: int, cols: int, row: int, col: int) -> Rect:
    cell_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    left = start_x + col * cell_size
    bottom = start_y + (rows - 1 - row) * cell_size
    return left, bottom, cell_size, cell_size


def compute_control_rects(window_width: int, window_height: int, count: int) -> List[Rect]:
    """Lay out ``count`` buttons in a centred strip along the top of the window."""
    if count <= 0:
        return []
    available = window_width - CONTROL_BUTTON_GAP * (count + 1)
    width = min(CONTROL_BUTTON_WIDTH, max(available / count, 1.0))
    total = width * count + CONTROL_BUTTON_GAP * (count - 1)
    left = (window_width - total) / 2
    bottom = window_height - CONTROL_TOP_MARGIN - CONTROL_BUTTON_HEIGHT
    return [
        (left + i * (width + CONTROL_BUTTON_GAP), bottom, width, CONTROL_BUTTON_HEIGHT)
        for i in range(count)
    ]


def compute_status_position(window_width: int, window_height: int) -> Tuple[float, float]:
    """Centre point of the status text line, just below the control strip."""
    y = window_height - CONTROL_TOP_MARGIN - CONTROL_BUTTON_HEIGHT - STATUS_GAP
    return window_width / 2, y


def point_in_rect(x: float, y: float, rect: Rect) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height
