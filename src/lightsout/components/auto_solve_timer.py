from dataclasses import dataclass

from lightsout.constants import AUTO_SOLVE_INTERVAL


@dataclass(slots=True)
class AutoSolveTimer:
    """Attached to the game state entity while an auto-solve replay runs.

    Removing the component cancels the replay; no further steps are taken.
    """
    interval: float = AUTO_SOLVE_INTERVAL
    elapsed: float = 0.0
