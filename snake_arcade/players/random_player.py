"""
Random player implementation - presses random direction keys.
"""

import random
from typing import Optional

from snake_arcade.domain.constants import KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN
from snake_arcade.domain.game_state import RenderSnapshot
from .base import Player

DIRECTION_KEYS = (KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN)


class RandomPlayer(Player):
    """
    Presses a uniformly random arrow key on some ticks.

    A demo input source for headless recordings, not a game AI: the board
    is never inspected, so the snake crashes as often as chance dictates.
    """

    name = "random"

    def __init__(self, press_probability: float = 0.3, rng: Optional[random.Random] = None):
        if not 0.0 <= press_probability <= 1.0:
            raise ValueError(f"press_probability must be within [0, 1], got {press_probability}")
        self.press_probability = press_probability
        self.rng = rng or random.Random()

    def get_key(self, snapshot: RenderSnapshot) -> Optional[int]:
        if self.rng.random() >= self.press_probability:
            return None
        return self.rng.choice(DIRECTION_KEYS)
