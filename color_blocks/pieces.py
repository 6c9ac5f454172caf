"""
pieces.py
Pieces on offer to the player and the generator that deals them three at a time.
"""

import random

from .config import COLOR_IDS, POOL_SIZE
from .shapes import SHAPES


class Piece:
    def __init__(self, shape, color, placed=False):
        self.shape = shape
        self.color = color
        self.placed = placed

    def clone(self):
        # shapes are immutable and shared
        return Piece(self.shape, self.color, self.placed)

    def __eq__(self, other):
        return (isinstance(other, Piece) and self.shape == other.shape
                and self.color == other.color and self.placed == other.placed)

    def __repr__(self):
        return "Piece(%r, %r%s)" % (self.shape, self.color, ", placed" if self.placed else "")


# choose a random piece for a new pool
def random_piece(rng=random):
    return Piece(rng.choice(SHAPES), rng.choice(COLOR_IDS))


def generate_pool(rng=random):
    """Three independent draws; repeats of shape and color are allowed."""
    return [random_piece(rng) for _ in range(POOL_SIZE)]


def clone_pool(pool):
    return [p.clone() for p in pool]
