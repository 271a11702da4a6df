import unittest
import sys
import os
import shutil

# Render off-screen; no display needed
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame

from maze_carver.core.grid import Grid, Direction
from maze_carver.viz.renderer import Renderer
from maze_carver.algo.dfs import RecursiveBacktracker

class TestRenderer(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def test_render_surface(self):
        grid = Grid(5, 5)
        grid.carve((1, 1), Direction.EAST)
        renderer = Renderer(grid, cell_size=4)

        surface = renderer.render_surface()
        self.assertEqual(surface.get_size(), (20, 20))

        # Wall at (0, 0), path at (1, 1) and (2, 1)
        self.assertEqual(tuple(surface.get_at((1, 1)))[:3], Renderer.COLOR_WALL)
        self.assertEqual(tuple(surface.get_at((5, 5)))[:3], Renderer.COLOR_PATH)
        self.assertEqual(tuple(surface.get_at((9, 6)))[:3], Renderer.COLOR_PATH)
        self.assertEqual(tuple(surface.get_at((13, 5)))[:3], Renderer.COLOR_WALL)

    def test_save_image(self):
        grid = Grid(11, 9)
        RecursiveBacktracker(grid, seed=1).run_all()

        path = "test_out/maze.bmp"
        Renderer(grid, cell_size=3).save_image(path)

        self.assertTrue(os.path.exists(path))
        loaded = pygame.image.load(path)
        self.assertEqual(loaded.get_size(), (33, 27))

    def test_fit_to_screen(self):
        grid = Grid(21, 11)
        renderer = Renderer(grid, width=800, height=600)
        renderer.fit_to_screen()
        # (800 - 80) // 21 = 34, (600 - 80) // 11 = 47
        self.assertEqual(renderer.cell_size, 34)
        self.assertEqual(renderer.offset_x, (800 - 21 * 34) // 2)

    def test_finish_generation(self):
        grid = Grid(21, 21)
        gen = RecursiveBacktracker(grid, seed=4)
        renderer = Renderer(grid, generator=gen)
        self.assertFalse(renderer.gen_finished)

        # Window closed after one frame worth of steps
        renderer.gen_iter = gen.run()
        next(renderer.gen_iter)
        renderer.finish_generation()

        self.assertTrue(renderer.gen_finished)
        self.assertEqual(gen.step_count, 10 * 10 - 1)

if __name__ == '__main__':
    unittest.main()
