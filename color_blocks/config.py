"""
config.py
Shared constants for the Color Blocks engine, its sibling games and the pygame front-end.
"""

import os

# ----------------------- Board -----------------------
GRID_SIZE = 8
POOL_SIZE = 3
EMPTY = None

# ----------------------- Colors -----------------------
# ColorId -> RGB. Order matters: pieces draw uniformly from this list.
PALETTE = {
    "orange": (255, 140, 0),
    "pink": (255, 20, 147),
    "green": (50, 205, 50),
    "purple": (153, 50, 204),
    "blue": (30, 144, 255),
}
COLOR_IDS = tuple(PALETTE)
EMPTY_COLOR = (46, 42, 60)

# ----------------------- Scoring -----------------------
LINE_SCORE = 100
COMBO_STEP = 0.5

# credits handed out at the start of every game
START_UNDO = 1
START_HINTS = 1

# ----------------------- Game identifiers -----------------------
COLOR_BLOCKS_ID = 1
MINESWEEPER_ID = 3
GAME_2048_ID = 4

# ----------------------- Persistence -----------------------
SCORES_FILE = os.environ.get("COLOR_BLOCKS_SCORES", "color_blocks_scores.json")

# ----------------------- Front-end -----------------------
SCREEN_W, SCREEN_H = 560, 820
FPS = 60
CELL = 52
GRID_X = (SCREEN_W - GRID_SIZE * CELL) // 2
GRID_Y = 150
TRAY_Y = GRID_Y + GRID_SIZE * CELL + 40
TRAY_CELL = 24
ASSETS = "assets"

BG = (24, 20, 34)
BOARD_BG = (36, 32, 48)
LINE = (30, 26, 40)
TEXT = (230, 230, 235)
ACCENT = (255, 170, 60)


def _check_palette():
    for color_id, rgb in PALETTE.items():
        if color_id is EMPTY:
            raise ValueError("the empty sentinel cannot be a color")
        if len(rgb) != 3 or not all(0 <= c <= 255 for c in rgb):
            raise ValueError("bad RGB triple for %r: %r" % (color_id, rgb))


_check_palette()
