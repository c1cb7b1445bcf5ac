import logging

import numpy as np

from components.body.snake import SnakeBody
from components.movement.component import MovementComponent
from constants.direction import Direction

logger = logging.getLogger(__name__)


class SnakeMovement(MovementComponent):
    def __init__(self, snake_body: SnakeBody, direction: Direction = Direction.RIGHT):
        super().__init__(direction)
        self.snake_body = snake_body

    def turn(self, new_direction: Direction) -> bool:
        """
        Change direction unless the snake would turn back into itself.
        Returns whether the change was accepted.
        """
        if self.direction.is_opposite(new_direction):
            logger.debug(
                "Ignoring %s request while moving %s",
                new_direction.name,
                self.direction.name,
            )
            return False

        self.direction = new_direction
        return True

    def next_position(self) -> tuple[int, int]:
        offset = np.array(self.direction.offset).astype(int)
        offset = np.multiply(offset, np.array([self.speed, self.speed]).astype(int))

        np_head = np.array(self.snake_body.head).astype(int)
        new_head = np.add(offset, np_head)

        return int(new_head[0]), int(new_head[1])
