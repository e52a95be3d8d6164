"""
Input sources for Snake Arcade.

This module contains the player abstraction and the implementations
that press keys on behalf of a human during headless runs.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer, parse_script
from .variant_registry import get_player_class, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'parse_script',
    'get_player_class',
    'AVAILABLE_VARIANTS',
]
