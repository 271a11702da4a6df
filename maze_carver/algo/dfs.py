import logging
import random
from typing import Iterator, List, Optional, Set, Tuple
from maze_carver.core.grid import Grid, Cell, Direction, Point
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carving on the odd-coordinate room lattice.

    Rooms sit at odd (x, y); the even cells between them are walls that get
    opened when two rooms are joined. The recursion is unrolled into a
    frontier stack plus a path history of points to backtrack to.
    """

    # Yield a progress update every N carves
    YIELD_EVERY = 100

    def __init__(self, grid: Grid, seed: int = None, rng: Optional[random.Random] = None,
                 start: Optional[Point] = None):
        super().__init__(grid, seed=seed, rng=rng)
        if start is not None:
            self._validate_start(start)
        self.start = start
        self.visited: List[Point] = []

    def _validate_start(self, start: Point):
        x, y = start
        if x % 2 == 0 or y % 2 == 0:
            raise ValueError(f"Start point {start} must have odd coordinates")
        if self.grid.is_out_of_bounds(start):
            raise ValueError(f"Start point {start} lies outside the carvable interior")

    def pick_start(self) -> Point:
        # Draw from [1, size - 4] so the first two-step probe stays inside the grid.
        # Small grids collapse the range to 1.
        x = self.rng.randint(1, max(1, self.grid.cols - 4))
        y = self.rng.randint(1, max(1, self.grid.rows - 4))
        if x % 2 == 0:
            x += 1
        if y % 2 == 0:
            y += 1
        return (x, y)

    def find_neighbour(self, point: Point, visited: Set[Point]) -> Optional[Tuple[Point, Direction]]:
        """
        Picks a random direction whose room two cells away is in bounds, unvisited
        and still a wall. Rejected directions are dropped from the pool until none remain.
        """
        directions: List[Direction] = list(Direction)

        while directions:
            index = self.rng.randrange(len(directions))
            direction = directions[index]
            neighbour = direction.step(point, 2)
            self.probe_count += 1

            # An already-open room belongs to the tree; joining it would close a loop
            if (neighbour in visited
                    or self.grid.is_out_of_bounds(neighbour)
                    or self.grid.is_empty(neighbour)):
                directions.pop(index)
            else:
                return neighbour, direction

        return None

    def run(self) -> Iterator[str]:
        start = self.start if self.start is not None else self.pick_start()
        logger.debug(f"Carving {self.grid.cols}x{self.grid.rows} grid from {start}")

        # The start room is opened even if it has no neighbour (tiny grids)
        sx, sy = start
        self.grid.set(sy, sx, Cell.EMPTY)

        visited = self.visited
        seen: Set[Point] = set(visited)
        # Point to return to once the current one is exhausted, one per carve
        previous_points: List[Point] = []
        stack: List[Point] = [start]

        while stack:
            point = stack.pop()

            found = self.find_neighbour(point, seen)
            if found:
                neighbour, direction = found

                # Carve
                self.grid.carve(point, direction)
                nx, ny = neighbour
                self.grid.set(ny, nx, Cell.EMPTY)

                visited.append(neighbour)
                seen.add(neighbour)
                stack.append(neighbour)
                previous_points.append(point)
                self.step_count += 1

                if self.step_count % self.YIELD_EVERY == 0:
                    logger.debug(f"Carved {self.step_count} rooms, path depth {len(previous_points)}")
                    yield f"Carving... Path: {len(previous_points)}"
            else:
                # Dead end
                if not previous_points:
                    break
                stack.append(previous_points.pop())

        logger.debug(f"Finished after {self.step_count} carves and {self.probe_count} probes")
        yield "Done"
