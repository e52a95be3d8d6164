"""
Base player interface for the game engine.
"""

from typing import Optional

from snake_arcade.domain.game_state import RenderSnapshot


class Player:
    """
    Base class/interface for input sources.

    A player looks at the current snapshot before each tick and returns the
    key code it presses, or None to leave the snake alone.
    """

    name = "player"

    def get_key(self, snapshot: RenderSnapshot) -> Optional[int]:
        """
        Return a key code given the current snapshot.

        Args:
            snapshot: Current frame of the game

        Returns:
            A key code (see domain.constants) or None
        """
        raise NotImplementedError
