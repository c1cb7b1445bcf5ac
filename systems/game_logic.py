import logging
import random
import time
from typing import Callable, Optional

from constants.direction import Direction
from constants.grid import GRID_HEIGHT, GRID_WIDTH, NORMAL_SPEED, GridBounds
from entities.game_state import GameState
from entities.type import Food, Snake
from schemas.game import FoodMessage, GameSnapshot
from systems.collision import is_fatal
from systems.effects import apply_effects
from systems.food_spawner import FoodSpawner
from systems.system import System

logger = logging.getLogger(__name__)


class GameLogicSystem(System):
    """
    Single player snake simulation.

    Every call to :meth:`update` advances the snake by one cell. The caller
    is responsible for pacing the calls with :meth:`current_tick_interval`.
    """

    def __init__(
        self,
        columns: int = GRID_WIDTH,
        rows: int = GRID_HEIGHT,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self._bounds = GridBounds(columns, rows)
        self._clock = clock
        self._food_spawner = FoodSpawner(rng)

        self.state: Optional[GameState] = None
        self.reset()

    def setup(self):
        self.reset()

    def run(self):
        self.update()

    def reset(self):
        columns, rows = self._bounds
        snake = Snake((columns // 2, rows // 2), size=3, direction=Direction.RIGHT)

        self.state = GameState(snake)
        self._spawn_food()
        logger.info("New game on a %dx%d grid", columns, rows)

    def update(self):
        state = self.state
        if state.game_over:
            return

        body = state.snake.body_component
        new_head = state.snake.movement_component.next_position()

        if is_fatal(new_head, self._bounds, body.segments):
            state.game_over = True
            logger.info("Game over at %s with score %d", new_head, state.score)
            return

        body.push_head(new_head)

        if state.food is not None and new_head == state.food.position:
            self._consume_food()
        else:
            body.pop_tail()

    def current_tick_interval(self) -> int:
        state = self.state
        if self._clock() > state.speed_boost_end_time:
            if state.tick_interval != NORMAL_SPEED:
                logger.debug("Speed boost expired")
            state.tick_interval = NORMAL_SPEED
        return state.tick_interval

    def increase_snake_length(self, length: int):
        self.state.snake.body_component.grow(length)

    def set_speed(self, new_speed: int, duration_nanos: int):
        self.state.tick_interval = new_speed
        self.state.speed_boost_end_time = self._clock() + duration_nanos

    def request_direction(self, direction: Direction) -> bool:
        return self.state.snake.movement_component.turn(direction)

    def request_reset(self):
        self.reset()

    def _consume_food(self):
        state = self.state
        food = state.food
        logger.debug("Ate %s worth %d", food.food_type.name, food.score)

        state.score += food.score
        apply_effects(food.food_type.effects, self)
        self._spawn_food()

    def _spawn_food(self):
        columns, rows = self._bounds
        self.state.food = self._food_spawner.spawn(self.state.snake.segments, columns, rows)

    @property
    def snake(self) -> list[tuple[int, int]]:
        return self.state.snake.segments

    @property
    def food(self) -> Optional[Food]:
        return self.state.food

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def direction(self) -> Direction:
        return self.state.snake.direction

    def snapshot(self) -> GameSnapshot:
        food = self.state.food
        food_message = None
        if food is not None:
            food_message = FoodMessage(
                position=food.position,
                food_type=food.food_type.name,
                color=food.color,
                score=food.score,
            )

        return GameSnapshot(
            snake=list(self.snake),
            food=food_message,
            score=self.score,
            game_over=self.game_over,
            direction=self.direction,
            tick_interval=self.current_tick_interval(),
        )
