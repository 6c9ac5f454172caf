from color_blocks.board import Board
from color_blocks.shapes import BY_NAME

from helpers import MONO, SQUARE, fill


def test_can_place_bounds():
    b = Board()
    assert b.can_place(MONO, 0, 0)
    assert b.can_place(MONO, 7, 7)
    assert not b.can_place(MONO, 8, 0)
    assert not b.can_place(MONO, 0, -1)
    bar = BY_NAME["bar-h"]
    assert b.can_place(bar, 5, 0)
    assert not b.can_place(bar, 6, 0)
    assert not b.can_place(BY_NAME["bar-v"], 0, 6)


def test_can_place_overlap_only_counts_filled_cells():
    b = Board()
    b.grid[1][0] = "blue"
    assert not b.can_place(SQUARE, 0, 0)
    # the empty corner of this shape sits on the taken cell
    assert b.can_place(BY_NAME["corner-sw"], 0, 0)
    assert not b.can_place(BY_NAME["corner-se"], 0, 0)


def test_place_writes_color():
    b = Board()
    b.place(BY_NAME["t-down"], "pink", 2, 3)
    assert b.get(2, 3) == b.get(3, 3) == b.get(4, 3) == b.get(3, 4) == "pink"
    assert b.occupied() == 4


def test_nothing_full_nothing_cleared():
    b = Board()
    fill(b, [(x, 0) for x in range(7)])
    before = b.clone()
    assert b.scan_and_clear() == 0
    assert b == before


def test_row_and_column_clear_together():
    b = Board()
    fill(b, [(x, 3) for x in range(8)])
    fill(b, [(5, y) for y in range(8)])
    assert b.occupied() == 15
    assert b.scan_and_clear() == 2
    assert b.is_empty()


def test_clear_leaves_other_cells_alone():
    b = Board()
    fill(b, [(x, 3) for x in range(8)])
    fill(b, [(5, y) for y in range(8)])
    fill(b, [(0, 0), (7, 7)], "orange")
    assert b.scan_and_clear() == 2
    assert b.occupied() == 2
    assert b.get(0, 0) == b.get(7, 7) == "orange"


def test_full_board_clears_in_one_go():
    b = Board()
    fill(b, [(x, y) for x in range(8) for y in range(8)])
    assert b.scan_and_clear() == 16
    assert b.is_empty()


def test_clone_is_deep():
    b = Board()
    c = b.clone()
    b.grid[0][0] = "green"
    assert c.get(0, 0) is None
