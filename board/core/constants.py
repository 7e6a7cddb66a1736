"""
Pitch Board - Editor Constants

All configuration constants for the board including layout values,
colors, and interaction thresholds.
"""

# Window
DEFAULT_SCREEN_WIDTH = 900
DEFAULT_SCREEN_HEIGHT = 900
FPS = 60

# UI Layout
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
BENCH_HEIGHT = 96
BENCH_HEIGHT_COMPACT = 72
ZONE_MARGIN = 12

# Pitch proportions (width / height of a 68m x 105m pitch, portrait)
PITCH_LENGTH_M = 105.0
PITCH_WIDTH_M = 68.0
PITCH_ASPECT = PITCH_WIDTH_M / PITCH_LENGTH_M
PITCH_FILL = 0.95  # fraction of the available area the pitch may occupy

# Below this window width the compact marker table is used
COMPACT_BREAKPOINT = 768

# Interaction thresholds
CLICK_THRESHOLD_PX = 5  # displacement below this on both axes is a click
HIT_TOLERANCE = 5.0  # percent, per axis; covers the marker radius (MARKER_SIZES) at usual window sizes
MIN_ARROW_LENGTH = 1.0  # percent; shorter gestures are accidental taps
MOVE_CLAMP_MIN = 2.0  # percent; live-dragged tokens stay inside this band
MOVE_CLAMP_MAX = 98.0
ARROW_HIT_TOLERANCE_PX = 8  # half of the 15px-wide invisible click target

# Modes
MODE_MOVE = "move"
MODE_DRAW = "draw"
MODES = (MODE_MOVE, MODE_DRAW)

# Colors
COLOR_BG = (30, 34, 38)
COLOR_TOOLBAR = (22, 24, 28)
COLOR_STATUS = (22, 24, 28)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DIM = (150, 150, 150)
COLOR_BUTTON = (64, 64, 64)
COLOR_BUTTON_HOVER = (80, 80, 80)
COLOR_BUTTON_ACTIVE = (60, 130, 90)
COLOR_BORDER = (90, 90, 90)

COLOR_PITCH = (74, 140, 92)
COLOR_PITCH_DARK = (61, 106, 77)
COLOR_PITCH_LINES = (235, 245, 235)

COLOR_BENCH = (44, 48, 54)
COLOR_BENCH_TARGET = (52, 78, 110)
COLOR_BENCH_TARGET_RING = (96, 165, 250)
COLOR_BENCH_SCROLL_TRACK = (60, 64, 72)
COLOR_BENCH_SCROLL_THUMB = (130, 136, 146)

COLOR_HOME = (234, 179, 8)
COLOR_HOME_TEXT = (17, 24, 39)
COLOR_AWAY = (220, 38, 38)
COLOR_AWAY_TEXT = (255, 255, 255)
COLOR_MARKER_BORDER = (255, 255, 255)
COLOR_SELECTED = (34, 197, 94)
COLOR_NOTE_DOT = (239, 68, 68)
COLOR_LABEL_BG = (0, 0, 0, 128)

ARROW_COLORS = {
    "white": (255, 255, 255),
    "yellow": (250, 204, 21),
    "red": (239, 68, 68),
    "blue": (96, 165, 250),
}
ARROW_WIDTH = 3
ARROW_HEAD_LENGTH = 12
ARROW_HEAD_WIDTH = 8
PREVIEW_DASH_PX = 5
