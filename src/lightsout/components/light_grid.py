from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class LightGrid:
    """Row-major light state for the board; ``True`` means the light is on."""
    rows: int
    cols: int
    lights: List[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.lights:
            self.lights = [False] * (self.rows * self.cols)
        elif len(self.lights) != self.rows * self.cols:
            raise ValueError(
                f"expected {self.rows * self.cols} lights for a {self.rows}x{self.cols} grid, got {len(self.lights)}"
            )

    def index_of(self, row: int, col: int) -> int:
        return row * self.cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_on(self, row: int, col: int) -> bool:
        return self.lights[self.index_of(row, col)]

    def reset(self, rows: int, cols: int) -> None:
        """Resize the grid and switch every light off."""
        self.rows = rows
        self.cols = cols
        self.lights = [False] * (rows * cols)
