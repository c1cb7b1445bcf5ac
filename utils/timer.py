import time
from typing import Callable


class Timer:
    def __init__(self, clock: Callable[[], int] = time.monotonic_ns):
        self._clock = clock
        self.reset()

    def reset(self):
        self._time = self._clock()

    def elapsed_ns(self):
        return self._clock() - self._time

    def elapsed_ms(self):
        elapsed = self.elapsed_ns()
        elapsed = elapsed / 1e6
        return elapsed

    def elapsed_sec(self):
        elapsed = self.elapsed_ns()
        elapsed = elapsed / 1e9
        return elapsed
