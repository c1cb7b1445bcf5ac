from typing import NamedTuple

# Canvas size in pixels
WIDTH = 800
HEIGHT = 600
TILE_SIZE = 20

GRID_WIDTH = WIDTH // TILE_SIZE
GRID_HEIGHT = HEIGHT // TILE_SIZE

# Tick intervals in nanoseconds
NORMAL_SPEED = 100_000_000  # 10 ticks per second
FAST_SPEED = 50_000_000  # 20 ticks per second
SPEED_BOOST_DURATION = 6_000_000_000

# Frames per second of the local loop, independent of the tick interval
FRAME_RATE = 60

# Placeholder for grown segments that have not reached a real cell yet
OFF_GRID = (-1, -1)


class GridBounds(NamedTuple):
    columns: int
    rows: int

    def contains(self, position: tuple[int, int]) -> bool:
        column, row = position
        return 0 <= column < self.columns and 0 <= row < self.rows
