from typing import Sequence

from constants.grid import GridBounds


def is_out_of_bounds(position: tuple[int, int], bounds: GridBounds) -> bool:
    return not bounds.contains(position)


def hits_body(position: tuple[int, int], body: Sequence[tuple[int, int]]) -> bool:
    # The current head is skipped since it can never be stepped on.
    # The current tail is still checked even though it moves away this tick.
    return tuple(position) in body[1:]


def is_fatal(
    candidate_head: tuple[int, int],
    bounds: GridBounds,
    body: Sequence[tuple[int, int]],
) -> bool:
    """
    Check whether moving the head to *candidate_head* ends the game.

    *body* is the snake before the move, head first. Food never makes a
    move fatal.
    """
    return is_out_of_bounds(candidate_head, bounds) or hits_body(candidate_head, body)
