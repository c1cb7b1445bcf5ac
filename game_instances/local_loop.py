import logging
import time
from typing import Callable, Iterable

import pygame

from constants.grid import FRAME_RATE, GRID_HEIGHT, GRID_WIDTH, TILE_SIZE
from schemas.game import CommandType, PlayerCommand
from systems.game_logic import GameLogicSystem
from systems.player_input import InputSystem
from systems.render import RenderSystem
from utils.timer import Timer

logger = logging.getLogger(__name__)


class LocalLoop:
    def __init__(
        self,
        rows=GRID_HEIGHT,
        columns=GRID_WIDTH,
        cell_size=TILE_SIZE,
        tick_rate=FRAME_RATE,
        clock: Callable[[], int] = time.monotonic_ns,
    ):
        self.rows = rows
        self.columns = columns
        self.cell_size = cell_size
        self.tick_rate = tick_rate

        self.game_logic_system = GameLogicSystem(columns, rows, clock=clock)
        self.rendering_system = RenderSystem(rows, columns, cell_size)
        self.input_system = InputSystem()

        self._tick_timer = Timer(clock)
        self._clock = None
        self._running = False

    def setup(self):
        pygame.init()

        self.input_system.setup()
        self.game_logic_system.setup()
        self.rendering_system.setup()

        self._clock = pygame.time.Clock()
        self._tick_timer.reset()
        self._running = True

    def close(self):
        pygame.quit()

    def run(self):
        self.setup()

        try:
            while self._running:
                self.handle_commands(self.input_system.run())
                if not self._running:
                    break

                self.tick()
                self.rendering_system.run(self.game_logic_system.snapshot())

                self._clock.tick(self.tick_rate)
        except KeyboardInterrupt:
            pass
        finally:
            self.close()

    def tick(self) -> bool:
        """
        Advance the game once the current tick interval has elapsed.
        Returns whether the game was advanced.
        """
        if self._tick_timer.elapsed_ns() < self.game_logic_system.current_tick_interval():
            return False

        self.game_logic_system.update()
        self._tick_timer.reset()
        return True

    def handle_commands(self, commands: Iterable[PlayerCommand]):
        game = self.game_logic_system
        for player_command in commands:
            if player_command.command == CommandType.QUIT:
                logger.info("Quit requested")
                self._running = False
                return
            elif player_command.command == CommandType.RESET:
                game.request_reset()
                self._tick_timer.reset()
            elif player_command.command == CommandType.MOVE:
                # Steering is ignored on the game over screen
                if not game.game_over:
                    game.request_direction(player_command.direction)
            else:
                raise ValueError(f"Unknown command '{player_command.command}'")
