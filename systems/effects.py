import logging
from typing import Iterable

from schemas.effects import Effect, GrowEffect, SpeedBoostEffect

logger = logging.getLogger(__name__)


def apply_effect(effect: Effect, engine):
    """
    Apply a single food effect to *engine*.

    The engine is expected to expose ``increase_snake_length`` and
    ``set_speed``.
    """
    if isinstance(effect, GrowEffect):
        logger.debug("Growing snake by %d", effect.amount)
        engine.increase_snake_length(effect.amount)
    elif isinstance(effect, SpeedBoostEffect):
        logger.debug(
            "Speed boost to %d ns per tick for %d ns",
            effect.new_speed,
            effect.duration_nanos,
        )
        engine.set_speed(effect.new_speed, effect.duration_nanos)
    else:
        raise ValueError(f"Unknown effect type '{type(effect).__name__}'")


def apply_effects(effects: Iterable[Effect], engine):
    for effect in effects:
        apply_effect(effect, engine)
