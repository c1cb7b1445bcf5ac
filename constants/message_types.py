from enum import Enum


class MessageTypes(Enum):
    # Input side
    PLAYER_COMMAND = "player_command"

    # Render side
    GAME_SNAPSHOT = "game_snapshot"
    FOOD = "food"

    # Effects
    GROW = "grow"
    SPEED_BOOST = "speed_boost"
