"""
Scripted player - replays a fixed key sequence, one entry per tick.
"""

from typing import Iterable, Optional

from snake_arcade.domain.constants import (
    KEY_SPACE, KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN,
    KEY_A, KEY_D, KEY_S, KEY_W,
)
from snake_arcade.domain.game_state import RenderSnapshot
from .base import Player

KEY_NAMES = {
    "space": KEY_SPACE,
    "left": KEY_LEFT,
    "up": KEY_UP,
    "right": KEY_RIGHT,
    "down": KEY_DOWN,
    "a": KEY_A,
    "d": KEY_D,
    "s": KEY_S,
    "w": KEY_W,
}

IDLE = "."


def parse_script(script: str) -> list:
    """
    Parse a whitespace separated key script such as "space . . left . up".

    "." means no key on that tick; numbers are taken as raw key codes.
    """
    keys = []
    for token in script.split():
        token = token.lower()
        if token == IDLE:
            keys.append(None)
        elif token in KEY_NAMES:
            keys.append(KEY_NAMES[token])
        elif token.isdigit():
            keys.append(int(token))
        else:
            valid = ", ".join(sorted(KEY_NAMES))
            raise ValueError(f"Unknown key '{token}' in script. Valid keys: {valid}, '.' or a key code")
    return keys


class ScriptedPlayer(Player):
    """Returns the next key of the script on every call, then None forever."""

    name = "scripted"

    def __init__(self, keys: Iterable[Optional[int]]):
        self.keys = list(keys)
        self.position = 0

    @classmethod
    def from_script(cls, script: str) -> "ScriptedPlayer":
        return cls(parse_script(script))

    @property
    def finished(self) -> bool:
        return self.position >= len(self.keys)

    def get_key(self, snapshot: RenderSnapshot) -> Optional[int]:
        if self.finished:
            return None
        key = self.keys[self.position]
        self.position += 1
        return key
