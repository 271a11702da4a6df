from enum import Enum, IntEnum
from typing import Iterator, Tuple

import numpy as np

# (x, y) -> x is the column, y is the row
Point = Tuple[int, int]


class Cell(IntEnum):
    EMPTY = 0
    WALL = 1


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, point: Point, distance: int = 1) -> Point:
        """Offset a point by 'distance' cells. 1 = the wall between rooms, 2 = the next room."""
        return (point[0] + self.dx * distance, point[1] + self.dy * distance)


class Grid:
    # Smallest size with an interior cell that can hold a room
    MIN_SIZE = 3

    WALL_GLYPH = "#"
    EMPTY_GLYPH = " "

    __slots__ = ('cols', 'rows', 'cells')

    def __init__(self, cols: int, rows: int):
        for name, value in (("cols", cols), ("rows", rows)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < self.MIN_SIZE:
                raise ValueError(f"{name} must be at least {self.MIN_SIZE}, got {value}")

        self.cols = int(cols)
        self.rows = int(rows)
        # Row-major (rows, cols), 1 byte per cell, everything starts as wall
        self.cells = np.full((self.rows, self.cols), Cell.WALL, dtype=np.uint8)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def _check(self, row: int, col: int):
        # numpy would silently wrap negative indices, so check explicitly
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell (row={row}, col={col}) out of bounds for {self.rows}x{self.cols} grid")

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return Cell(int(self.cells[row, col]))

    def set(self, row: int, col: int, cell: Cell):
        self._check(row, col)
        self.cells[row, col] = cell

    def is_out_of_bounds(self, point: Point) -> bool:
        """
        True if the point lies on or outside the outer ring.
        The ring itself is never carved, so the maze keeps its perimeter wall.
        """
        x, y = point
        return x <= 0 or x >= self.cols - 1 or y <= 0 or y >= self.rows - 1

    def is_empty(self, point: Point) -> bool:
        x, y = point
        return self.get(y, x) == Cell.EMPTY

    def carve(self, point: Point, direction: Direction):
        """
        Opens 'point' and the cell one step away in 'direction'.
        Carving never turns a cell back into a wall.
        """
        x, y = point
        tx, ty = direction.step(point, 1)
        self.set(y, x, Cell.EMPTY)
        self.set(ty, tx, Cell.EMPTY)

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self.cells == cell))

    def iter_points(self) -> Iterator[Point]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield (x, y)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Point]:
        """
        Yields (nx, ny) for the 4-neighbors of (x, y) that are inside the buffer and EMPTY.
        """
        for direction in Direction:
            nx, ny = direction.step((x, y), 1)
            if 0 <= nx < self.cols and 0 <= ny < self.rows and self.cells[ny, nx] == Cell.EMPTY:
                yield (nx, ny)

    def to_text(self, wall: str = WALL_GLYPH, empty: str = EMPTY_GLYPH) -> str:
        lines = []
        for row in self.cells:
            lines.append("".join(wall if value == Cell.WALL else empty for value in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Grid(cols={self.cols}, rows={self.rows})"
