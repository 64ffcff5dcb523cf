"""Components for the action triggers shown above the board."""
from dataclasses import dataclass
from enum import Enum, auto


class ControlAction(Enum):
    """Actions that a control button can trigger."""
    NEW_GAME_3X3 = auto()
    NEW_GAME_5X5 = auto()
    AUTO_SOLVE = auto()


@dataclass
class ControlButton:
    """Clickable control; ``order`` fixes its slot in the control strip."""
    label: str
    action: ControlAction
    order: int
    enabled: bool = True
