"""
Domain entities for the Snake Arcade game engine.

This module contains the core game entities that are independent of
display and input concerns (windows, fonts, keyboards, video files).
"""

from .constants import Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES, KEY_TO_DIRECTION, PAUSE_KEY
from .tile import Tile
from .snake import Snake
from .food import Food
from .board import Board
from .game_state import GameState, RenderSnapshot

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'KEY_TO_DIRECTION', 'PAUSE_KEY',
    'Tile',
    'Snake',
    'Food',
    'Board',
    'GameState',
    'RenderSnapshot',
]
