from collections import deque
from typing import Dict, List, Set

import numpy as np

from maze_carver.core.grid import Grid, Cell, Point

class MazeInspector:
    @staticmethod
    def open_cells(grid: Grid) -> List[Point]:
        ys, xs = np.nonzero(grid.cells == Cell.EMPTY)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        """
        Flood fill from the first open cell and check it reaches every other one.
        A grid with no open cells is not a maze, so it does not count as connected.
        """
        cells = MazeInspector.open_cells(grid)
        if not cells:
            return False

        seen: Set[Point] = {cells[0]}
        queue = deque([cells[0]])
        while queue:
            x, y = queue.popleft()
            for n in grid.get_open_neighbors(x, y):
                if n not in seen:
                    seen.add(n)
                    queue.append(n)

        return len(seen) == len(cells)

    @staticmethod
    def has_open_block(grid: Grid) -> bool:
        """True if any 2x2 block is entirely open (a loop)."""
        open_ = grid.cells == Cell.EMPTY
        block = open_[:-1, :-1] & open_[1:, :-1] & open_[:-1, 1:] & open_[1:, 1:]
        return bool(block.any())

    @staticmethod
    def perimeter_intact(grid: Grid) -> bool:
        c = grid.cells
        return bool((c[0, :] == Cell.WALL).all() and (c[-1, :] == Cell.WALL).all()
                    and (c[:, 0] == Cell.WALL).all() and (c[:, -1] == Cell.WALL).all())

    @staticmethod
    def count_rooms(grid: Grid) -> int:
        # Rooms live on odd (x, y)
        return int(np.count_nonzero(grid.cells[1::2, 1::2] == Cell.EMPTY))

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        junctions = 0 # 3 or 4 exits

        rooms = MazeInspector.count_rooms(grid)
        open_cells = grid.count(Cell.EMPTY)

        for y in range(1, grid.rows, 2):
            for x in range(1, grid.cols, 2):
                if grid.cells[y, x] != Cell.EMPTY:
                    continue
                exits = sum(1 for _ in grid.get_open_neighbors(x, y))
                if exits == 1: dead_ends += 1
                elif exits >= 3: junctions += 1

        total = grid.cols * grid.rows
        return {
            "open_cells": open_cells,
            "rooms": rooms,
            "corridors": open_cells - rooms,
            "dead_ends": dead_ends,
            "junctions": junctions,
            "open_percent": (open_cells / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        Connected, loop-free and walled in. In a spanning tree over the rooms
        every corridor cell is one edge, so corridors == rooms - 1.
        """
        stats = MazeInspector.calculate_stats(grid)
        return (MazeInspector.is_connected(grid)
                and not MazeInspector.has_open_block(grid)
                and MazeInspector.perimeter_intact(grid)
                and stats["corridors"] == stats["rooms"] - 1)
