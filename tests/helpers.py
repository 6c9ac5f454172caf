from color_blocks.pieces import Piece
from color_blocks.shapes import BY_NAME

MONO = BY_NAME["mono"]
SQUARE = BY_NAME["square"]


def monos(*colors):
    return [Piece(MONO, c) for c in colors]


class ScriptedPools:
    """Deals the given pools in order, then pools of blue monominoes."""

    def __init__(self, *pools):
        self.pools = list(pools)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.pools:
            return self.pools.pop(0)
        return monos("blue", "blue", "blue")


def checkerboard(board, color="green"):
    # no two empty cells touch, so nothing bigger than a monomino fits and no line is full
    for x in range(board.size):
        for y in range(board.size):
            if (x + y) % 2 == 0:
                board.grid[x][y] = color


def fill(board, cells, color="green"):
    for x, y in cells:
        board.grid[x][y] = color
