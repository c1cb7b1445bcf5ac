from enum import Enum

from constants.grid import FAST_SPEED, SPEED_BOOST_DURATION
from schemas.effects import GrowEffect, SpeedBoostEffect


class FoodType(Enum):
    # (color, score, effects applied in order when eaten)
    APPLE = ("#e74c3c", 1, (GrowEffect(amount=1),))
    GOLDEN_APPLE = (
        "#f1c40f",
        5,
        (
            GrowEffect(amount=1),
            SpeedBoostEffect(new_speed=FAST_SPEED, duration_nanos=SPEED_BOOST_DURATION),
        ),
    )
    GREEN_FOOD = ("#2ecc71", 10, (GrowEffect(amount=5),))

    def __init__(self, color, score, effects):
        self.color = color
        self.score = score
        self.effects = effects
