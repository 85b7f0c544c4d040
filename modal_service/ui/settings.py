"""Central settings and UI constants for the pygame modal presenter."""

WIDTH, HEIGHT = 1200, 700

# === ANIMATION ===
ANIMATION_DURATION_MS = 180  # default enter / swap / exit duration (options['duration_ms'] overrides)
ANIMATION_FRAME_MS = 16  # cooperative frame step while tweening
SWAP_OFFSET_PX = 24  # vertical slide distance for entering / leaving panels

# === MODAL PANEL ===
PANEL_WIDTH = 520
PANEL_HEIGHT = 220
PANEL_PADDING = 16
PANEL_RADIUS = 10
FONT_SIZE = 24

# === COLOR PALETTE ===

# Backdrop dims whatever is below the frontmost modal
BACKDROP_COLOR = (0, 0, 0)
BACKDROP_ALPHA = 160

# Panel colors
PANEL_BG = (40, 60, 80)
PANEL_BORDER = (80, 110, 140)

# Text colors
TEXT_TITLE = (235, 225, 210)
TEXT_BODY = (230, 235, 240)
TEXT_HINT = (180, 180, 180)

# Button colors
BTN_CONFIRM = (80, 200, 110)
BTN_CANCEL = (180, 80, 60)
BTN_TEXT = (0, 0, 0)
