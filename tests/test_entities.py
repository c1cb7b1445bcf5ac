from constants.direction import Direction
from entities.food_type import FoodType
from entities.type import Food, Snake


def test_foods_compare_by_identity():
    apple = Food((0, 0), FoodType.APPLE)
    green_food = Food((5, 5), FoodType.GREEN_FOOD)

    assert apple != green_food
    assert apple == apple
    assert len({apple, green_food}) == 2


def test_food_compares_to_none():
    food = Food((0, 0), FoodType.APPLE)
    assert food != None  # noqa: E711
    assert not (food == None)  # noqa: E711


def test_food_reads_its_type():
    food = Food((3, 4), FoodType.GOLDEN_APPLE)
    assert food.position == (3, 4)
    assert food.color == "#f1c40f"
    assert food.score == 5


def test_snake_entity():
    snake = Snake((5, 5), size=2, direction=Direction.UP)
    assert snake.segments == [(5, 5), (4, 5)]
    assert snake.direction == Direction.UP

    snake.segments = [[1, 1]]
    assert snake.segments == [(1, 1)]
