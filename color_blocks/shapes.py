"""
shapes.py
The fixed catalog of polyomino shapes pieces are drawn from.
"""


class Shape:
    """A 0/1 matrix, rows top to bottom, placed with its top-left corner on the anchor cell.

    Rows are stored as tuples so the catalog can be shared between pieces without copying.
    """

    def __init__(self, rows, name=""):
        rows = tuple(tuple(1 if v else 0 for v in row) for row in rows)
        if not rows or not rows[0]:
            raise ValueError("shape must have at least one row and column")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("shape rows must all have the same length")
        if not any(any(row) for row in rows):
            raise ValueError("shape must occupy at least one cell")
        self.rows = rows
        self.name = name
        self.height = len(rows)
        self.width = len(rows[0])
        # (dx, dy) offsets of occupied cells
        self.cells = tuple((dx, dy) for dy, row in enumerate(rows)
                           for dx, v in enumerate(row) if v)

    def __eq__(self, other):
        return isinstance(other, Shape) and self.rows == other.rows

    def __hash__(self):
        return hash(self.rows)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return "Shape(%r)" % (self.name or [list(r) for r in self.rows])


# ----------------------- Catalog -----------------------
SHAPES = (
    Shape([[1]], "mono"),

    Shape([[1], [1]], "domino-v"),
    Shape([[1, 1]], "domino-h"),

    Shape([[1, 0], [1, 1]], "corner-sw"),
    Shape([[1, 1], [1, 0]], "corner-nw"),
    Shape([[0, 1], [1, 1]], "corner-se"),
    Shape([[1, 1], [0, 1]], "corner-ne"),

    Shape([[1, 1], [1, 1]], "square"),

    Shape([[1, 1, 1]], "bar-h"),
    Shape([[1], [1], [1]], "bar-v"),

    Shape([[1, 1, 0], [0, 1, 1]], "z-h"),
    Shape([[0, 1], [1, 1], [1, 0]], "z-v"),

    Shape([[1, 1, 1], [0, 1, 0]], "t-down"),
    Shape([[0, 1], [1, 1], [0, 1]], "t-left"),
    Shape([[0, 1, 0], [1, 1, 1]], "t-up"),
    Shape([[1, 0], [1, 1], [1, 0]], "t-right"),
)

BY_NAME = {s.name: s for s in SHAPES}
