import logging
import random
from typing import Optional, Sequence

from entities.food_type import FoodType
from entities.type import Food

logger = logging.getLogger(__name__)


class FoodSpawner:
    def __init__(self, rng: Optional[random.Random] = None, max_attempts: Optional[int] = None):
        self._rng = rng if rng is not None else random.Random()
        self._max_attempts = max_attempts

    def spawn(self, body: Sequence[tuple[int, int]], columns: int, rows: int) -> Optional[Food]:
        """
        Place a food of a random type on a random cell not covered by *body*.

        Returns None when every cell is taken.
        """
        occupied = set(body)
        food_position = self._sample_position(occupied, columns, rows)
        if food_position is None:
            logger.warning("No free cell left for food on a %dx%d grid", columns, rows)
            return None

        food_type = self._rng.choice(list(FoodType))
        food = Food(food_position, food_type)
        logger.debug("Spawned %s", food)
        return food

    def _sample_position(self, occupied: set, columns: int, rows: int):
        max_attempts = self._max_attempts
        if max_attempts is None:
            max_attempts = columns * rows * 4

        for _ in range(max_attempts):
            food_position = (
                self._rng.randint(0, columns - 1),
                self._rng.randint(0, rows - 1),
            )
            if food_position not in occupied:
                return food_position

        # Nearly full grid, pick among the cells that are actually free
        free_cells = [
            (column, row)
            for column in range(columns)
            for row in range(rows)
            if (column, row) not in occupied
        ]
        if not free_cells:
            return None
        return self._rng.choice(free_cells)
