from .effects import Effect, GrowEffect, SpeedBoostEffect
from .game import CommandType, FoodMessage, GameSnapshot, PlayerCommand
