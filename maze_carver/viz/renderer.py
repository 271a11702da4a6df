import logging
import pygame
from maze_carver.core.grid import Grid, Cell

logger = logging.getLogger(__name__)

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_PATH = (60, 100, 160) # Blue tint

    # Generator steps consumed per frame while animating
    STEPS_PER_FRAME = 1

    def __init__(self, grid: Grid, generator=None, cell_size: int = 8, width=1280, height=720):
        self.grid = grid
        self.generator = generator
        self.cell_size = cell_size
        self.screen_width = width
        self.screen_height = height

        self.offset_x = 0
        self.offset_y = 0

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None
        self.gen_iter = None

    def fit_to_screen(self):
        """Auto-adjust cell size and offset to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = max(1, min(available_w // self.grid.cols, available_h // self.grid.rows))

        total_maze_w = self.grid.cols * self.cell_size
        total_maze_h = self.grid.rows * self.cell_size
        self.offset_x = (self.screen_width - total_maze_w) // 2
        self.offset_y = (self.screen_height - total_maze_h) // 2

    def draw_grid(self, surface: pygame.Surface, offset_x: int = 0, offset_y: int = 0):
        surface.fill(self.COLOR_BG)
        size = self.cell_size

        for y in range(self.grid.rows):
            for x in range(self.grid.cols):
                color = self.COLOR_WALL if self.grid.cells[y, x] == Cell.WALL else self.COLOR_PATH
                rect = (offset_x + x * size, offset_y + y * size, size, size)
                pygame.draw.rect(surface, color, rect)

    def render_surface(self) -> pygame.Surface:
        """Draws the grid to an off-screen surface. No window needed."""
        surface = pygame.Surface((self.grid.cols * self.cell_size, self.grid.rows * self.cell_size))
        self.draw_grid(surface)
        return surface

    def save_image(self, path: str):
        pygame.image.save(self.render_surface(), path)
        logger.info(f"Saved {self.grid.cols}x{self.grid.rows} maze image to {path}")

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Carver - {self.grid.cols}x{self.grid.rows}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Done" if self.gen_finished else "Carving"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.cols}x{self.grid.rows}",
            f"Status: {status}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        if self.generator and self.gen_iter is None:
            self.gen_iter = self.generator.run()

        while self.running:
            self.handle_input()

            # Step Generator
            if self.gen_iter and not self.gen_finished:
                try:
                    for _ in range(self.STEPS_PER_FRAME):
                        next(self.gen_iter)
                except StopIteration:
                    self.gen_finished = True

            self.draw_grid(self.surface, self.offset_x, self.offset_y)
            self.draw_hud()
            pygame.display.flip()

            self.clock.tick(60)

        pygame.quit()

    def finish_generation(self):
        """Runs any carving left over when the window was closed early."""
        if self.generator is None or self.gen_finished:
            return
        if self.gen_iter is None:
            self.gen_iter = self.generator.run()
        for _ in self.gen_iter:
            pass
        self.gen_finished = True
