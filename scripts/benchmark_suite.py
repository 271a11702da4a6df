import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.algo.dfs import RecursiveBacktracker
from maze_carver.core.analysis import MazeInspector

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    start_time = time.time()
    grid = Grid(width, height)
    print(f"Grid Init: {time.time() - start_time:.4f}s")
    print(f"Memory (Grid Data): ~{grid.cells.nbytes / (1024 * 1024):.2f} MB")

    algo = RecursiveBacktracker(grid, seed=42)

    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Probes: {algo.probe_count:,} ({algo.probe_count / (width * height):.2f} per cell)")
    if gen_time > 0:
        print(f"Speed: {(width*height)/gen_time:,.0f} cells/sec")

    stats = MazeInspector.calculate_stats(grid)
    print(f"Dead ends: {stats['dead_ends']}, junctions: {stats['junctions']}")

def run_suite():
    sizes = [
        (101, 101),
        (501, 501),
        (1001, 1001),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
