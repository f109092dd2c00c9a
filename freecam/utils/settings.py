# freecam/utils/settings.py
"""
Centralized settings and constants for the camera controller.
"""

# --- General Settings ---
WINDOW_TITLE = "freecam"
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
CLEAR_COLOR = (163, 169, 194)

# --- Camera Settings ---
BASE_FAR = 1000.0              # far plane at zoom 1.0; scaled by zoom
DEFAULT_CAMERA_DEPTH = 999.9   # render-order z of a 2D camera
DEFAULT_ZOOM_LEVELS = (1.0, 4.0)  # inclusive [start, end]
DEFAULT_INITIAL_ZOOM = 1.0
KEY_PAN_SPEED = 10.0           # world units per frame for keyboard panning
ZOOM_INVERT_WHEEL = False

# Edge comparisons in the bounds clamp tolerate this much overshoot so a
# clamped translation is a fixed point of the clamp.
CLAMP_EPSILON = 1e-6

# Run the bounds clamp every frame instead of only when something changed.
ALWAYS_CLAMP = False

# --- Input Bindings ---
PAN_MOUSE_BUTTON = 3  # pygame.BUTTON_RIGHT

# Direction -> pygame key names (see pygame.key.key_code)
PAN_KEYS = {
    "left":  ["left", "a"],
    "right": ["right", "d"],
    "up":    ["up", "w"],
    "down":  ["down", "s"],
}

# --- Viewer Settings ---
TILE_SIZE = 32
TILE_COLORS = ((110, 140, 90), (95, 125, 80))
BOUNDS_OUTLINE_COLOR = (40, 40, 40)
