"""
game2048.py
2048 on a 4x4 board. Slide every tile one way, equal tiles merge once per move.
"""

import logging
import random
from collections import namedtuple

from .config import GAME_2048_ID

log = logging.getLogger(__name__)

SIZE = 4
TARGET = 2048
FOUR_CHANCE = 0.1

# (dx, dy) on grid[x][y]
DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

# ----------------------- Tile styling -----------------------
TileStyle = namedtuple("TileStyle", "background text font_size")

TEXT_DARK = (119, 110, 101)
TEXT_LIGHT = (249, 246, 242)
EMPTY_CELL = (205, 193, 180)

TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}


def _check_tile_colors():
    expected = set()
    v = 2
    while v <= TARGET:
        expected.add(v)
        v *= 2
    if set(TILE_COLORS) != expected:
        raise ValueError("TILE_COLORS must cover exactly %s" % sorted(expected))


_check_tile_colors()


def tile_style(value):
    if value == 0:
        return TileStyle(EMPTY_CELL, TEXT_DARK, 24)
    background = TILE_COLORS.get(value, TILE_COLORS[TARGET])
    text = TEXT_DARK if value <= 4 else TEXT_LIGHT
    font_size = 24 if value < 100 else 20 if value < 1000 else 16
    return TileStyle(background, text, font_size)


# ----------------------- Game -----------------------
class Game2048:
    def __init__(self, store=None, rng=None, size=SIZE):
        self.size = size
        self.store = store
        self.rng = rng or random
        self.best_score = store.best_score(GAME_2048_ID) if store is not None else 0
        self.new_game()

    def new_game(self):
        self.grid = [[0] * self.size for _ in range(self.size)]
        self.score = 0
        self.won = False
        self.keep_going = False
        self.is_over = False
        self.spawn_tile()
        self.spawn_tile()
        if self.store is not None:
            self.store.increment_play_count(GAME_2048_ID)

    def inside(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def empty_cells(self):
        return [(x, y) for x in range(self.size) for y in range(self.size) if self.grid[x][y] == 0]

    def spawn_tile(self):
        cells = self.empty_cells()
        if not cells:
            return None
        x, y = self.rng.choice(cells)
        self.grid[x][y] = 4 if self.rng.random() < FOUR_CHANCE else 2
        return x, y

    def moves_available(self):
        if self.empty_cells():
            return True
        for x in range(self.size):
            for y in range(self.size):
                v = self.grid[x][y]
                if x + 1 < self.size and self.grid[x + 1][y] == v:
                    return True
                if y + 1 < self.size and self.grid[x][y + 1] == v:
                    return True
        return False

    def _traversals(self, dx, dy):
        xs = list(range(self.size))
        ys = list(range(self.size))
        # walk from the side tiles are heading towards
        if dx == 1:
            xs.reverse()
        if dy == 1:
            ys.reverse()
        return xs, ys

    def slide(self, direction):
        """Apply a move to the grid without spawning. Returns (moved, points)."""
        if direction not in DIRECTIONS:
            raise ValueError("unknown direction %r" % (direction,))
        dx, dy = DIRECTIONS[direction]
        xs, ys = self._traversals(dx, dy)
        merged = set()
        moved = False
        points = 0
        for x in xs:
            for y in ys:
                value = self.grid[x][y]
                if value == 0:
                    continue
                fx, fy = x, y
                while self.inside(fx + dx, fy + dy) and self.grid[fx + dx][fy + dy] == 0:
                    fx, fy = fx + dx, fy + dy
                nx, ny = fx + dx, fy + dy
                if (self.inside(nx, ny) and self.grid[nx][ny] == value
                        and (nx, ny) not in merged):
                    self.grid[nx][ny] = value * 2
                    self.grid[x][y] = 0
                    merged.add((nx, ny))
                    points += value * 2
                    if value * 2 >= TARGET:
                        self.won = True
                    moved = True
                elif (fx, fy) != (x, y):
                    self.grid[fx][fy] = value
                    self.grid[x][y] = 0
                    moved = True
        return moved, points

    def move(self, direction):
        if self.is_over or (self.won and not self.keep_going):
            return False
        moved, points = self.slide(direction)
        if not moved:
            return False
        self.score += points
        if self.score > self.best_score:
            self.best_score = self.score
            if self.store is not None:
                self.store.update_score(GAME_2048_ID, self.score)
        self.spawn_tile()
        if not self.moves_available():
            self.is_over = True
            log.info("2048 over, score %d", self.score)
        return True

    def keep_playing(self):
        if self.won:
            self.keep_going = True
