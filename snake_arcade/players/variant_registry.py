"""
Registry for player variants.

Maps variant keys (e.g., 'random', 'scripted') to player classes.
To add a variant, create a module with a Player subclass, import it
here, and add an entry to PLAYER_VARIANTS.
"""

from typing import Dict, Type, Optional
from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "scripted": ScriptedPlayer,
}

AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'random', 'scripted'. If None or empty, returns random.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = "random"

    variant_key = variant_key.strip().lower()

    if variant_key not in PLAYER_VARIANTS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANTS[variant_key]
