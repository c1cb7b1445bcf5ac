import pygame
import pytest
from pydantic import ValidationError

from constants.direction import Direction
from schemas.game import CommandType, PlayerCommand
from systems.player_input import InputSystem


def key_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_arrow_keys_become_move_commands():
    keys = [pygame.K_UP, pygame.K_LEFT, pygame.K_DOWN, pygame.K_RIGHT]
    commands = InputSystem().translate([key_event(key) for key in keys])
    assert [command.direction for command in commands] == [
        Direction.UP,
        Direction.LEFT,
        Direction.DOWN,
        Direction.RIGHT,
    ]
    assert all(command.command == CommandType.MOVE for command in commands)


def test_enter_resets_and_escape_quits():
    commands = InputSystem().translate(
        [key_event(pygame.K_RETURN), key_event(pygame.K_ESCAPE), pygame.event.Event(pygame.QUIT)]
    )
    assert [command.command for command in commands] == [
        CommandType.RESET,
        CommandType.QUIT,
        CommandType.QUIT,
    ]


def test_other_keys_are_ignored():
    assert InputSystem().translate([key_event(pygame.K_a)]) == []


def test_move_command_needs_direction():
    with pytest.raises(ValidationError):
        PlayerCommand(command=CommandType.MOVE)
