import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.core.maze import Maze
from maze_carver.algo.dfs import RecursiveBacktracker

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--cols", type=int, default=41, help="Grid columns (including the outer wall)")
    gen_parser.add_argument("--rows", type=int, default=21, help="Grid rows (including the outer wall)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation in a window")
    gen_parser.add_argument("--image", type=str, help="Save the finished maze as an image")
    gen_parser.add_argument("--cell-size", type=int, default=8, help="Pixels per cell for --image")
    gen_parser.add_argument("--quiet", "-q", action="store_true", help="Do not print the text maze")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation")
    bench_parser.add_argument("--size", type=int, default=501, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def cmd_generate(args, parser, logger):
    try:
        maze = Maze(args.cols, args.rows, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Generating {args.cols}x{args.rows} maze (seed={args.seed})...")

    if args.visual:
        from maze_carver.viz.renderer import Renderer
        logger.info("Visual mode enabled - Opening window...")
        generator = RecursiveBacktracker(maze.grid, seed=args.seed)
        renderer = Renderer(maze.grid, generator=generator)
        renderer.init_window()
        renderer.run_loop()
        renderer.finish_generation()
    else:
        maze.generate()

    if not args.quiet:
        print(maze.display())

    if args.stats:
        from maze_carver.core.analysis import MazeInspector
        stats = MazeInspector.calculate_stats(maze.grid)
        logger.info(f"Stats: {stats}")

    if args.image:
        from maze_carver.viz.renderer import Renderer
        Renderer(maze.grid, cell_size=args.cell_size).save_image(args.image)

def cmd_benchmark(args, parser, logger):
    try:
        grid = Grid(args.size, args.size)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Benchmarking {args.size}x{args.size} generation...")
    gen = RecursiveBacktracker(grid, seed=args.seed)

    t0 = time.time()
    gen.run_all()
    duration = time.time() - t0

    logger.info(f"Generation complete in {duration:.4f}s")
    logger.info(f"Passages: {gen.step_count}, probes: {gen.probe_count}")
    if duration > 0:
        logger.info(f"Speed: {(args.size * args.size) / duration:,.0f} cells/sec")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.command is None:
        parser.print_help()
        return

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        cmd_generate(args, parser, logger)
    elif args.command == "benchmark":
        cmd_benchmark(args, parser, logger)

if __name__ == "__main__":
    main()
