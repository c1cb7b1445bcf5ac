from constants.direction import Direction


class MovementComponent:
    def __init__(self, direction: Direction = Direction.RIGHT):
        self.direction = direction
        self.speed = 1  # Grid squares per tick

    def next_position(self):
        raise NotImplementedError(
            f"Child component MUST implement {self.next_position.__name__}"
        )
