from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from constants.message_types import MessageTypes


class GrowEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["grow"] = MessageTypes.GROW.value
    amount: PositiveInt


class SpeedBoostEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["speed_boost"] = MessageTypes.SPEED_BOOST.value
    new_speed: PositiveInt  # Nanoseconds per tick
    duration_nanos: PositiveInt


Effect = Annotated[Union[GrowEffect, SpeedBoostEffect], Field(discriminator="type")]
