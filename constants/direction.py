from enum import Enum


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    def is_opposite(self, other: "Direction") -> bool:
        # Opposite directions have offsets that cancel each other out
        dx, dy = self.value
        other_dx, other_dy = other.value
        return dx + other_dx == 0 and dy + other_dy == 0
