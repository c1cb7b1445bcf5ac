from typing import Iterable

import pygame

from constants.direction import Direction
from schemas.game import CommandType, PlayerCommand
from systems.system import System

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class InputSystem(System):
    def setup(self):
        pass

    def run(self) -> list[PlayerCommand]:
        return self.translate(pygame.event.get())

    def translate(self, events: Iterable[pygame.event.Event]) -> list[PlayerCommand]:
        commands = []
        for event in events:
            if event.type == pygame.QUIT:
                commands.append(PlayerCommand(command=CommandType.QUIT))
            elif event.type == pygame.KEYDOWN:
                if event.key in KEY_DIRECTIONS:
                    commands.append(
                        PlayerCommand(command=CommandType.MOVE, direction=KEY_DIRECTIONS[event.key])
                    )
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    commands.append(PlayerCommand(command=CommandType.RESET))
                elif event.key == pygame.K_ESCAPE:
                    commands.append(PlayerCommand(command=CommandType.QUIT))
        return commands
