"""Window and status bar constants."""

# Timing
FPS = 60

# Window
SCREEN_W = 900
SCREEN_H = 600
STATUS_H = 28
CAPTION = "Arc Bounce Sweep — tick-sweep demo"

# Status bar
STATUS_BG = (60, 60, 70)
TEXT_COLOR = (235, 235, 240)
TEXT_DIM = (170, 170, 180)
