"""Color Blocks: an 8x8 block-placement puzzle, with 2048 and Minesweeper alongside."""

from .board import Board
from .engine import Game, Hint, line_score
from .pieces import Piece, generate_pool
from .scores import ScoreStore
from .shapes import SHAPES, Shape

__version__ = "1.0.0"
