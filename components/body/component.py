class BodyComponent:
    def __init__(self, starting_position: tuple[int, int] = (0, 0)):
        self.segments: list[tuple[int, int]] = [tuple(starting_position)]

    @property
    def position(self):
        return self.segments[0]
