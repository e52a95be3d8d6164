"""
Game constants for Snake Arcade.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """Movement directions in canvas coordinates (y grows downwards)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """Return the direction for a case-insensitive name such as 'Right'."""
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown direction '{name}'. Valid directions: {valid}")


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Key codes (DOM keyCode values)
KEY_SPACE = 32
KEY_LEFT = 37
KEY_UP = 38
KEY_RIGHT = 39
KEY_DOWN = 40
KEY_A = 65
KEY_D = 68
KEY_S = 83
KEY_W = 87

KEY_TO_DIRECTION: Dict[int, Direction] = {
    KEY_LEFT: LEFT,
    KEY_UP: UP,
    KEY_RIGHT: RIGHT,
    KEY_DOWN: DOWN,
    KEY_A: LEFT,
    KEY_W: UP,
    KEY_D: RIGHT,
    KEY_S: DOWN,
}

PAUSE_KEY = KEY_SPACE

# Status messages
START_TEXT = "Press space to start"
RESUME_TEXT = "Press space to resume"
GAME_OVER_TEXT = "Game over! Score: {score}"

# Game settings
DEFAULT_BOARD_WIDTH = 26
DEFAULT_BOARD_HEIGHT = 26
DEFAULT_TILE_SIZE = 16
DEFAULT_TICK_INTERVAL_MS = 50
DEFAULT_SCORE_INCREMENT = 2
