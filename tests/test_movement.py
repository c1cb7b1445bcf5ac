import pytest

from components.body.snake import SnakeBody
from components.movement.snake import SnakeMovement
from constants.direction import Direction
from constants.grid import OFF_GRID


@pytest.mark.parametrize(
    "direction, opposite",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite_directions(direction, opposite):
    assert direction.is_opposite(opposite)
    assert not direction.is_opposite(direction)


def test_snake_body_layout():
    body = SnakeBody((5, 5), 3)
    assert body.segments == [(5, 5), (4, 5), (3, 5)]
    assert body.head == (5, 5)
    assert body.tail == [(4, 5), (3, 5)]


def test_pop_tail_keeps_the_head():
    body = SnakeBody((5, 5), 1)
    assert body.pop_tail() is None
    assert body.segments == [(5, 5)]


def test_grow_and_trim():
    body = SnakeBody((5, 5), 2)
    body.grow(2)
    assert body.segments == [(5, 5), (4, 5), OFF_GRID, OFF_GRID]

    body.push_head((6, 5))
    assert body.pop_tail() == OFF_GRID
    assert len(body) == 4
    assert body.pending_growth() == 1


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (5, 4)),
        (Direction.DOWN, (5, 6)),
        (Direction.LEFT, (4, 5)),
        (Direction.RIGHT, (6, 5)),
    ],
)
def test_next_position(direction, expected):
    movement = SnakeMovement(SnakeBody((5, 5), 1), direction)
    new_head = movement.next_position()
    assert new_head == expected
    assert all(type(value) is int for value in new_head)


def test_turn_rejects_reversal():
    movement = SnakeMovement(SnakeBody((5, 5), 3), Direction.RIGHT)
    assert not movement.turn(Direction.LEFT)
    assert movement.direction == Direction.RIGHT
    assert movement.turn(Direction.DOWN)
    assert movement.direction == Direction.DOWN
