from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, NonNegativeInt, PositiveInt, model_validator

from constants.direction import Direction
from constants.message_types import MessageTypes


class CommandType(Enum):
    MOVE = "move"
    RESET = "reset"
    QUIT = "quit"


class PlayerCommand(BaseModel):
    type: str = MessageTypes.PLAYER_COMMAND.value
    command: CommandType
    direction: Optional[Direction] = None

    @model_validator(mode="after")
    def _check_direction(self):
        if self.command == CommandType.MOVE and self.direction is None:
            raise ValueError("Move commands need a direction")
        return self


class FoodMessage(BaseModel):
    type: str = MessageTypes.FOOD.value
    position: tuple[int, int]
    food_type: str
    color: str
    score: PositiveInt


class GameSnapshot(BaseModel):
    """
    Everything the renderer needs to draw one frame.
    """

    type: str = MessageTypes.GAME_SNAPSHOT.value
    snake: List[tuple[int, int]]
    food: Optional[FoodMessage] = None
    score: NonNegativeInt
    game_over: bool
    direction: Direction
    tick_interval: PositiveInt
