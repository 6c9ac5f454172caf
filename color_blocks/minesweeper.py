"""
minesweeper.py
Minesweeper. Mines are laid on the first reveal and never next to that first cell.
"""

import logging
import random
import time
from collections import deque

from .config import MINESWEEPER_ID

log = logging.getLogger(__name__)

DIFFICULTY = {
    "easy": (9, 9, 10),
    "medium": (12, 12, 30),
    "hard": (16, 16, 60),
}

HIDDEN, REVEALED, FLAGGED = "hidden", "revealed", "flagged"
WAITING, PLAYING, WON, LOST = "waiting", "playing", "won", "lost"


def score_for_time(seconds):
    return max(1000 - int(seconds), 0)


class Cell:
    def __init__(self):
        self.mine = False
        self.status = HIDDEN
        self.adjacent = 0

    def __repr__(self):
        return "Cell(mine=%r, %s, %d)" % (self.mine, self.status, self.adjacent)


class Minesweeper:
    def __init__(self, difficulty="easy", store=None, rng=None, clock=time.monotonic):
        if difficulty not in DIFFICULTY:
            raise ValueError("unknown difficulty %r" % (difficulty,))
        self.difficulty = difficulty
        self.rows, self.cols, self.mines = DIFFICULTY[difficulty]
        self.store = store
        self.rng = rng or random
        self.clock = clock
        self.new_game()

    def new_game(self):
        self.board = [[Cell() for _ in range(self.cols)] for _ in range(self.rows)]
        self.status = WAITING
        self.mines_left = self.mines
        self.revealed = 0
        self.started_at = None
        self.elapsed = 0
        self.score = 0
        if self.store is not None:
            self.store.increment_play_count(MINESWEEPER_ID)

    def inside(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbours(self, row, col):
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if (dr or dc) and self.inside(row + dr, col + dc):
                    yield row + dr, col + dc

    def lay_mines(self, first_row, first_col):
        # the 3x3 block around the first click stays clear
        free = [(r, c) for r in range(self.rows) for c in range(self.cols)
                if abs(r - first_row) > 1 or abs(c - first_col) > 1]
        for r, c in self.rng.sample(free, self.mines):
            self.board[r][c].mine = True
        self.count_adjacent()

    def count_adjacent(self):
        for r in range(self.rows):
            for c in range(self.cols):
                cell = self.board[r][c]
                if not cell.mine:
                    cell.adjacent = sum(1 for nr, nc in self.neighbours(r, c)
                                        if self.board[nr][nc].mine)

    def reveal(self, row, col):
        """Reveal a hidden cell. Returns False when the click does nothing."""
        if self.status in (WON, LOST) or not self.inside(row, col):
            return False
        if self.board[row][col].status != HIDDEN:
            return False
        if self.status == WAITING:
            self.lay_mines(row, col)
            self.status = PLAYING
            self.started_at = self.clock()

        if self.board[row][col].mine:
            self.board[row][col].status = REVEALED
            self._lose()
            return True

        queue = deque([(row, col)])
        while queue:
            r, c = queue.popleft()
            cell = self.board[r][c]
            if cell.status != HIDDEN or cell.mine:
                continue
            cell.status = REVEALED
            self.revealed += 1
            if cell.adjacent == 0:
                queue.extend(self.neighbours(r, c))

        if self.revealed == self.rows * self.cols - self.mines:
            self._win()
        return True

    def toggle_flag(self, row, col):
        if self.status != PLAYING or not self.inside(row, col):
            return False
        cell = self.board[row][col]
        if cell.status == REVEALED:
            return False
        if cell.status == HIDDEN:
            if self.mines_left <= 0:
                return False
            cell.status = FLAGGED
            self.mines_left -= 1
        else:
            cell.status = HIDDEN
            self.mines_left += 1
        return True

    def _stop_clock(self):
        self.elapsed = self.clock() - self.started_at

    def _lose(self):
        self._stop_clock()
        self.status = LOST
        for line in self.board:
            for cell in line:
                if cell.mine:
                    cell.status = REVEALED
        log.info("minesweeper lost after %.0fs", self.elapsed)

    def _win(self):
        self._stop_clock()
        self.status = WON
        for line in self.board:
            for cell in line:
                if cell.mine:
                    cell.status = FLAGGED
        self.mines_left = 0
        self.score = score_for_time(self.elapsed)
        log.info("minesweeper won in %.0fs", self.elapsed)
        if self.store is not None:
            self.store.update_score(MINESWEEPER_ID, self.score)
