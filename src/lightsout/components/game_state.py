"""Game state resource describing the active puzzle's mode and timing."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """High-level modes that decide which inputs are honoured."""
    PLAYING = auto()
    AUTO_SOLVING = auto()
    SOLVED = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and solve timing."""
    mode: GameMode = GameMode.PLAYING
    started_at: float = 0.0
    solve_seconds: Optional[int] = None
