import logging
import random
from typing import Optional
from maze_carver.core.grid import Grid, Point
from maze_carver.algo.dfs import RecursiveBacktracker

logger = logging.getLogger(__name__)

class Maze:
    """
    A perfect maze on a cols x rows grid.

    The grid starts as solid wall; generate() carves it in place. Build a new
    Maze for a fresh layout: calling generate() again continues from the
    current state and never re-walls anything.
    """

    def __init__(self, cols: int, rows: int, seed: int = None, rng: Optional[random.Random] = None):
        self._grid = Grid(cols, rows)
        self.seed = seed
        self.rng = rng
        self.generations = 0
        self.probe_count = 0

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def rows(self) -> int:
        return self._grid.rows

    def generate(self, start: Optional[Point] = None) -> "Maze":
        if self.generations:
            logger.warning("generate() called again on the same Maze; the result may not be a perfect maze")

        generator = RecursiveBacktracker(self._grid, seed=self.seed, rng=self.rng, start=start)
        generator.run_all()

        self.generations += 1
        self.probe_count = generator.probe_count
        logger.info(f"Generated {self.cols}x{self.rows} maze ({generator.step_count} passages)")
        return self

    def display(self) -> str:
        return self._grid.to_text()

    def __str__(self) -> str:
        return self.display()
