"""
board.py
The 8x8 grid. Cells hold None (empty) or a ColorId.
"""

from .config import EMPTY, GRID_SIZE


class Board:
    def __init__(self, size=GRID_SIZE):
        self.size = size
        # indexed grid[x][y]; x is the column, y the row
        self.grid = [[EMPTY] * size for _ in range(size)]

    def clone(self):
        b = Board(self.size)
        b.grid = [col[:] for col in self.grid]
        return b

    def get(self, x, y):
        return self.grid[x][y]

    def is_empty(self):
        return all(v is EMPTY for col in self.grid for v in col)

    def occupied(self):
        return sum(1 for col in self.grid for v in col if v is not EMPTY)

    def can_place(self, shape, x, y):
        # bounds first, so an out-of-range anchor never touches the grid
        if x < 0 or y < 0 or x + shape.width > self.size or y + shape.height > self.size:
            return False
        for dx, dy in shape.cells:
            if self.grid[x + dx][y + dy] is not EMPTY:
                return False
        return True

    def place(self, shape, color, x, y):
        # caller has already checked can_place
        for dx, dy in shape.cells:
            self.grid[x + dx][y + dy] = color

    def full_lines(self):
        rows = [y for y in range(self.size)
                if all(self.grid[x][y] is not EMPTY for x in range(self.size))]
        cols = [x for x in range(self.size)
                if all(v is not EMPTY for v in self.grid[x])]
        return rows, cols

    def scan_and_clear(self):
        """Clear every complete row and column found on the board as it stands.

        Lines are collected before anything is cleared, so a cell shared by a full row and a
        full column clears once but both lines count. Returns the number of lines cleared.
        """
        rows, cols = self.full_lines()
        for y in rows:
            for x in range(self.size):
                self.grid[x][y] = EMPTY
        for x in cols:
            for y in range(self.size):
                self.grid[x][y] = EMPTY
        return len(rows) + len(cols)

    def __eq__(self, other):
        return isinstance(other, Board) and self.grid == other.grid

    def __repr__(self):
        lines = []
        for y in range(self.size):
            lines.append("".join("." if self.grid[x][y] is EMPTY else self.grid[x][y][0]
                                 for x in range(self.size)))
        return "\n".join(lines)
