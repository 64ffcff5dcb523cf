from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_CELL_CLICK = "cell_click"                    # payload: row, col
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: rows=int, cols=int
EVENT_AUTO_SOLVE_REQUEST = "auto_solve_request"    # payload: None


# ============================================================================
# BOARD
# ============================================================================
EVENT_NEW_GAME_STARTED = "new_game_started"        # payload: rows=int, cols=int, toggles=int, attempts=int
EVENT_LIGHTS_TOGGLED = "lights_toggled"            # payload: row, col, positions=list[(r,c)], source=str
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str
EVENT_PUZZLE_SOLVED = "puzzle_solved"              # payload: seconds=int, moves=int


# ============================================================================
# AUTO-SOLVE
# ============================================================================
EVENT_AUTO_SOLVE_STARTED = "auto_solve_started"    # payload: remaining=int
EVENT_AUTO_SOLVE_STOPPED = "auto_solve_stopped"    # payload: reason=str


# ============================================================================
# GAME FLOW & UI
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_STATUS_CHANGED = "status_changed"            # payload: text=str
EVENT_CONTROL_STATE_CHANGED = "control_state_changed"  # payload: action=ControlAction, enabled=bool
