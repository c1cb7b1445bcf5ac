from components.body.component import BodyComponent
from components.body.snake import SnakeBody
from components.movement.snake import SnakeMovement
from constants.direction import Direction
from entities.base import Entity
from entities.food_type import FoodType


# Define the player snake
class Snake(Entity):
    def __init__(
        self,
        start_position: tuple[int, int],
        size: int = 3,
        direction: Direction = Direction.RIGHT,
    ):
        super().__init__()

        self.body_component = SnakeBody(start_position, size)
        self.movement_component = SnakeMovement(self.body_component, direction)

    @property
    def segments(self):
        return self.body_component.segments

    @segments.setter
    def segments(self, new_segments: list[tuple[int, int]]):
        self.body_component.segments = [tuple(segment) for segment in new_segments]

    @property
    def direction(self) -> Direction:
        return self.movement_component.direction


# Define the food
class Food(Entity):
    def __init__(self, start_position: tuple[int, int], food_type: FoodType):
        super().__init__()

        self.body_component = BodyComponent(start_position)
        self.food_type = food_type

    @property
    def position(self):
        return self.body_component.position

    @property
    def color(self) -> str:
        return self.food_type.color

    @property
    def score(self) -> int:
        return self.food_type.score

    def __repr__(self) -> str:
        return f"Food({self.position}, {self.food_type.name})"
