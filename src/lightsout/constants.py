# Supported board sizes (rows == cols).
SMALL_GRID_SIZE = 3
LARGE_GRID_SIZE = 5
SUPPORTED_GRID_SIZES = (SMALL_GRID_SIZE, LARGE_GRID_SIZE)
DEFAULT_GRID_SIZE = SMALL_GRID_SIZE

# Number of random toggles applied when scrambling a fresh board.
RANDOM_TOGGLE_COUNT = 20
# Seconds between auto-solve steps.
AUTO_SOLVE_INTERVAL = 0.25

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Lights Out"
UPDATE_RATE = 1 / 60

# Board maximum footprint relative to window (percentage of window width/height).
# The render/layout code sizes the board so it does not exceed either percentage.
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.65
BOTTOM_MARGIN = 24
MIN_CELL_SIZE = 20
CELL_PADDING = 6

# Control strip above the board.
CONTROL_BUTTON_WIDTH = 180
CONTROL_BUTTON_HEIGHT = 44
CONTROL_BUTTON_GAP = 16
CONTROL_TOP_MARGIN = 24
# Status text sits between the controls and the board.
STATUS_FONT_SIZE = 20
STATUS_GAP = 28

LIGHT_ON_COLOR = (250, 214, 72)       # #FAD648
LIGHT_OFF_COLOR = (44, 52, 74)        # #2C344A
LIGHT_OUTLINE_COLOR = (16, 18, 28)
BACKGROUND_COLOR = (12, 14, 22)
STATUS_TEXT_COLOR = (236, 236, 236)
