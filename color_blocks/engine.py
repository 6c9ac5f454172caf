"""
engine.py
Color Blocks game session: three pieces at a time on an 8x8 board.

Placing a piece fills its cells, then every complete row and column clears at once.
When all three pieces are used a fresh set is dealt. The game ends the moment no
unplaced piece fits anywhere. One undo and one hint are available per game.
"""

import logging
import math
import random
from collections import deque, namedtuple

from .board import Board
from .config import COLOR_BLOCKS_ID, COMBO_STEP, LINE_SCORE, START_HINTS, START_UNDO
from .pieces import clone_pool, generate_pool

log = logging.getLogger(__name__)

HistoryEntry = namedtuple("HistoryEntry", "board pool score")
Hint = namedtuple("Hint", "index x y")
Snapshot = namedtuple("Snapshot", "board pool score best_score undo_credits hint_credits is_over")


def line_score(cleared):
    """Points for clearing `cleared` lines with one placement: 100, 200, 450, 800, ..."""
    if cleared <= 0:
        return 0
    bonus = cleared * COMBO_STEP if cleared > 1 else 1
    return int(math.floor(cleared * LINE_SCORE * bonus))


class Game:
    def __init__(self, store=None, reporter=None, generate=None, rng=None,
                 game_id=COLOR_BLOCKS_ID):
        self.game_id = game_id
        self.store = store
        if reporter is None and store is not None:
            reporter = store.update_score
        self.reporter = reporter
        self.rng = rng or random
        self._generate = generate or (lambda: generate_pool(self.rng))
        self.best_score = store.best_score(game_id) if store is not None else 0
        self.new_game()

    def new_game(self):
        self.board = Board()
        self.score = 0
        self.undo_credits = START_UNDO
        self.hint_credits = START_HINTS
        # undo reaches back at most START_UNDO placements
        self.history = deque(maxlen=START_UNDO)
        self.pool = self._generate()
        self.is_over = False
        if self.store is not None:
            self.store.increment_play_count(self.game_id)
        log.info("new game %s, best %d", self.game_id, self.best_score)

    # ----------------------- queries -----------------------
    def positions(self):
        # row-major, top-left first
        size = self.board.size
        for y in range(size):
            for x in range(size):
                yield x, y

    def preview(self, index, x, y):
        """Read-only check used for the drag ghost. Never changes the game."""
        if self.is_over or not 0 <= index < len(self.pool):
            return False
        piece = self.pool[index]
        return not piece.placed and self.board.can_place(piece.shape, x, y)

    def any_valid_for_index(self, index):
        piece = self.pool[index]
        if piece.placed:
            return False
        return any(self.board.can_place(piece.shape, x, y) for x, y in self.positions())

    def any_move_exists(self):
        return any(self.any_valid_for_index(i) for i in range(len(self.pool)))

    def snapshot(self):
        return Snapshot(self.board.clone(), tuple(clone_pool(self.pool)), self.score,
                        self.best_score, self.undo_credits, self.hint_credits, self.is_over)

    # ----------------------- actions -----------------------
    def try_place(self, index, x, y):
        if self.is_over:
            log.debug("placement after game over ignored")
            return False
        if not 0 <= index < len(self.pool) or self.pool[index].placed:
            log.debug("piece %r is not available", index)
            return False
        piece = self.pool[index]
        # re-check here: a preview may have been computed against an older board
        if not self.board.can_place(piece.shape, x, y):
            log.debug("piece %d does not fit at (%d, %d)", index, x, y)
            return False

        self.history.append(HistoryEntry(self.board.clone(), clone_pool(self.pool), self.score))
        self.board.place(piece.shape, piece.color, x, y)
        piece.placed = True

        cleared = self.board.scan_and_clear()
        if cleared:
            self.score += line_score(cleared)
            if self.score > self.best_score:
                self.best_score = self.score
                self._report()

        if all(p.placed for p in self.pool):
            self.pool = self._generate()

        # only the pool the player will actually face decides the game
        if not self.any_move_exists():
            self.is_over = True
            log.info("game over, score %d", self.score)
            self._report()
        return True

    def undo(self):
        if self.is_over or not self.history or self.undo_credits <= 0:
            return False
        entry = self.history.pop()
        self.board = entry.board
        self.pool = entry.pool
        self.score = entry.score
        self.undo_credits -= 1
        log.info("undo, %d left", self.undo_credits)
        return True

    def find_hint(self):
        """First (piece, cell) that fits, pieces in order and cells row-major.

        A credit is spent only when something is found.
        """
        if self.is_over or self.hint_credits <= 0:
            return None
        for index, piece in enumerate(self.pool):
            if piece.placed:
                continue
            for x, y in self.positions():
                if self.board.can_place(piece.shape, x, y):
                    self.hint_credits -= 1
                    return Hint(index, x, y)
        return None

    def leave(self):
        self._report()

    def _report(self):
        if self.reporter is not None:
            self.reporter(self.game_id, self.score)
