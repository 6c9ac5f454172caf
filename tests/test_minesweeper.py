import random

import pytest

from color_blocks.config import MINESWEEPER_ID
from color_blocks.minesweeper import (FLAGGED, HIDDEN, LOST, PLAYING, REVEALED, WAITING, WON,
                                      Minesweeper, score_for_time)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def mines(game):
    return [(r, c) for r in range(game.rows) for c in range(game.cols) if game.board[r][c].mine]


def test_first_reveal_is_always_safe():
    for seed in range(20):
        game = Minesweeper(rng=random.Random(seed))
        assert game.status == WAITING
        assert game.reveal(4, 4)
        assert game.status in (PLAYING, WON)
        laid = mines(game)
        assert len(laid) == 10
        assert all(abs(r - 4) > 1 or abs(c - 4) > 1 for r, c in laid)


def test_flood_fill_opens_around_zeros():
    game = Minesweeper(rng=random.Random(2))
    game.reveal(0, 0)
    assert game.revealed >= 4
    for r in range(game.rows):
        for c in range(game.cols):
            cell = game.board[r][c]
            if cell.status == REVEALED and cell.adjacent == 0:
                assert all(game.board[nr][nc].status == REVEALED for nr, nc in game.neighbours(r, c))


def rigged(clock=None, store=None):
    """Easy game already under way with mines along the bottom row and at (7, 0)."""
    game = Minesweeper(store=store, clock=clock or FakeClock())
    for r, c in [(8, c) for c in range(9)] + [(7, 0)]:
        game.board[r][c].mine = True
    game.count_adjacent()
    game.status = PLAYING
    game.started_at = game.clock()
    return game


def test_hitting_a_mine_loses():
    game = rigged()
    assert game.reveal(8, 0)
    assert game.status == LOST
    assert all(game.board[r][c].status == REVEALED for r, c in mines(game))
    assert not game.reveal(0, 0)


def test_win_scores_by_time(store):
    clock = FakeClock()
    game = rigged(clock, store)
    clock.now = 42.0
    assert game.reveal(0, 0)
    assert game.revealed == 71
    assert game.status == WON
    assert game.score == 958
    assert game.mines_left == 0
    assert all(game.board[r][c].status == FLAGGED for r, c in mines(game))
    assert store.best_score(MINESWEEPER_ID) == 958


def test_flags():
    assert not Minesweeper().toggle_flag(0, 0)
    game = rigged()
    assert game.toggle_flag(8, 8)
    assert game.mines_left == 9
    assert not game.reveal(8, 8)
    assert game.toggle_flag(8, 8)
    assert game.board[8][8].status == HIDDEN
    assert game.mines_left == 10
    game.reveal(0, 0)
    assert not game.toggle_flag(0, 0)


def test_flags_are_limited_by_the_mine_count():
    game = rigged()
    for c in range(9):
        assert game.toggle_flag(0, c)
    assert game.toggle_flag(1, 0)
    assert not game.toggle_flag(1, 1)
    assert game.mines_left == 0


def test_hand_built_field():
    game = Minesweeper(rng=random.Random(0))
    game.board[0][0].mine = True
    game.count_adjacent()
    assert game.board[1][1].adjacent == 1
    assert game.board[2][2].adjacent == 0


def test_score_for_time():
    assert score_for_time(0) == 1000
    assert score_for_time(999.6) == 1
    assert score_for_time(5000) == 0


def test_unknown_difficulty():
    with pytest.raises(ValueError):
        Minesweeper("nightmare")
