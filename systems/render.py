import pygame

from constants.grid import OFF_GRID
from schemas.game import GameSnapshot
from systems.system import System

BACKGROUND_COLOR = pygame.Color("#2c3e50")
GRID_COLOR = pygame.Color("#34495e")
BORDER_COLOR = pygame.Color("#ecf0f1")
HEAD_COLOR = pygame.Color("#1abc9c")
BODY_COLOR = pygame.Color("#16a085")
TEXT_COLOR = pygame.Color("#ffffff")

SCORE_BAR_HEIGHT = 40
OVERLAY_ALPHA = 204


class RenderSystem(System):
    def __init__(self, rows: int, columns: int, cell_size: int, surface: pygame.Surface = None):
        self.cell_size = cell_size
        self.board_width = self.cell_size * columns
        self.board_height = self.cell_size * rows
        self.columns = columns
        self.rows = rows

        self.window = surface
        self._owns_window = surface is None
        self._fonts = {}

    def setup(self):
        if self.window is None:
            self.window = pygame.display.set_mode(
                (self.board_width, self.board_height + SCORE_BAR_HEIGHT)
            )
            pygame.display.set_caption("Snake Game")

        pygame.font.init()
        self._fonts = {
            "title": pygame.font.Font(None, 64),
            "score": pygame.font.Font(None, 32),
            "hint": pygame.font.Font(None, 26),
        }

    def run(self, snapshot: GameSnapshot):
        self.window.fill(BACKGROUND_COLOR)

        self._draw_grid()
        self._draw_border()
        self._draw_snake(snapshot)
        self._draw_food(snapshot)
        self._draw_score(snapshot.score)

        if snapshot.game_over:
            self._draw_game_over(snapshot.score)

        if self._owns_window:
            pygame.display.flip()

    def _cell_rect(self, position):
        return (
            position[0] * self.cell_size,
            position[1] * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def _draw_grid(self):
        for column in range(self.columns):
            x = column * self.cell_size
            pygame.draw.line(self.window, GRID_COLOR, (x, 0), (x, self.board_height))
        for row in range(self.rows):
            y = row * self.cell_size
            pygame.draw.line(self.window, GRID_COLOR, (0, y), (self.board_width, y))

    def _draw_border(self):
        pygame.draw.rect(
            self.window, BORDER_COLOR, (0, 0, self.board_width, self.board_height), width=4
        )

    def _draw_snake(self, snapshot: GameSnapshot):
        for index, segment in enumerate(snapshot.snake):
            if segment == OFF_GRID:
                continue
            color = HEAD_COLOR if index == 0 else BODY_COLOR
            pygame.draw.rect(
                self.window, color, self._cell_rect(segment), border_radius=self.cell_size // 4
            )

    def _draw_food(self, snapshot: GameSnapshot):
        if snapshot.food is None:
            return
        pygame.draw.ellipse(
            self.window, pygame.Color(snapshot.food.color), self._cell_rect(snapshot.food.position)
        )

    def _draw_score(self, score: int):
        if "score" not in self._fonts:
            return
        label = self._fonts["score"].render(f"Score: {score}", True, TEXT_COLOR)
        label_rect = label.get_rect(
            center=(self.board_width // 2, self.board_height + SCORE_BAR_HEIGHT // 2)
        )
        self.window.blit(label, label_rect)

    def _draw_game_over(self, score: int):
        overlay = pygame.Surface((self.board_width, self.board_height), pygame.SRCALPHA)
        overlay.fill((*BACKGROUND_COLOR[:3], OVERLAY_ALPHA))
        self.window.blit(overlay, (0, 0))

        if not self._fonts:
            return

        center_x = self.board_width // 2
        center_y = self.board_height // 2
        lines = [
            ("title", "Game Over", center_y - 50),
            ("score", f"Your Score: {score}", center_y),
            ("hint", "Press ENTER to restart", center_y + 50),
        ]
        for font_name, text, y in lines:
            label = self._fonts[font_name].render(text, True, TEXT_COLOR)
            self.window.blit(label, label.get_rect(center=(center_x, y)))
