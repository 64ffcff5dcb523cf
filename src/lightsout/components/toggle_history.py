from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(slots=True)
class ToggleHistory:
    """Chronological log of every toggle applied since the current puzzle began.

    Toggles are self-inverse, so undoing the log from the end walks the board
    back to the all-off state.
    """
    moves: List[Tuple[int, int]] = field(default_factory=list)

    def record(self, row: int, col: int) -> None:
        self.moves.append((row, col))

    def pop(self) -> Tuple[int, int]:
        return self.moves.pop()

    def clear(self) -> None:
        self.moves.clear()

    def __len__(self) -> int:
        return len(self.moves)
