from components.body.component import BodyComponent
from constants.grid import OFF_GRID


class SnakeBody(BodyComponent):
    """
    Ordered snake segments, head first.

    Growth is delayed: grown segments are appended as OFF_GRID placeholders
    and only turn into real cells as the body slides over them.
    """

    def __init__(self, position: tuple[int, int], size: int = 3):
        super().__init__(starting_position=position)

        for i in range(1, size):
            self.segments.append((position[0] - i, position[1]))

    @property
    def head(self):
        return self.segments[0]

    @property
    def tail(self):
        return self.segments[1:]

    def push_head(self, new_head: tuple[int, int]):
        self.segments.insert(0, tuple(new_head))

    def pop_tail(self):
        # Never leave the snake without a head
        if len(self.segments) > 1:
            return self.segments.pop()
        return None

    def grow(self, amount: int):
        for _ in range(amount):
            self.segments.append(OFF_GRID)

    def pending_growth(self) -> int:
        return self.segments.count(OFF_GRID)

    def __len__(self):
        return len(self.segments)
