import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

from entities.food_type import FoodType  # noqa: E402
from entities.type import Food  # noqa: E402
from systems.game_logic import GameLogicSystem  # noqa: E402


class ManualClock:
    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, nanos: int):
        self.now += nanos


@pytest.fixture
def clock():
    return ManualClock(now=1_000)


@pytest.fixture
def game(clock):
    game = GameLogicSystem(40, 30, rng=random.Random(7), clock=clock)
    # Keep the food out of the snake's way unless a test places it
    game.state.food = Food((0, 0), FoodType.APPLE)
    return game
