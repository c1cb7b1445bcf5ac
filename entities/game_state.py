from typing import Optional

from constants.grid import NORMAL_SPEED
from entities.type import Food, Snake


class GameState:
    """
    Mutable state of one game, owned by the game logic system.

    Other systems receive it for the duration of a single call and must not
    keep a reference across ticks.
    """

    def __init__(self, snake: Snake, food: Optional[Food] = None):
        self.snake = snake
        self.food = food
        self.score = 0
        self.game_over = False
        self.tick_interval = NORMAL_SPEED
        self.speed_boost_end_time = 0
