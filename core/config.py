"""Centralized configuration constants."""

TITLE = "vimg"

# Used when the desktop size cannot be queried
DEFAULT_CANVAS_WIDTH = 1280
DEFAULT_CANVAS_HEIGHT = 720

# Zoom: extent multiplier per wheel notch, and bounds on the camera zoom
# (ratio of visible extent to canvas size)
ZOOM_STEP = 1.1
MIN_ZOOM = 0.01
MAX_ZOOM = 100.0

# Frame pacing used when vsync is enabled
VSYNC_FPS = 60

BACKGROUND_COLOR = (0, 0, 0)

LEFT_BUTTON = 1
