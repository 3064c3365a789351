"""
Window dimensions, colors, font sizes, block palette, hitbox style and
logging configuration.
"""

import os

WIDTH, HEIGHT = 960, 540
FPS = 60
BG_COLOR = (25, 28, 33)
TEXT_COLOR = (235, 235, 235)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16

# Default hitbox outline (base render hook)
HITBOX_COLOR = (255, 0, 0)
HITBOX_WIDTH = 1

# Block visuals
BLOCK_BORDER = (20, 22, 27)
BLOCK_BORDER_WIDTH = 2
DRAG_HIGHLIGHT = 40                # added to each channel while dragged
PIN_COLOR = (220, 60, 60)
PIN_RADIUS = 4
BLOCK_PALETTE = [
    (86, 156, 214),
    (106, 190, 120),
    (230, 180, 80),
    (190, 120, 200),
]

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
