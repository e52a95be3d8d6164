"""
Food entity - a single consumable tile.
"""

import random
from typing import Collection, Optional, Sequence

from .tile import Tile

DEFAULT_FOOD_COLORS = ("#EA2014", "#F59E0B", "#EC4899", "#8B5CF6")


class Food:
    """
    Holds the food position and colour on a width x height grid.

    The position is not checked against the snake unless the caller passes
    tiles to avoid.
    """

    def __init__(
        self,
        width: int,
        height: int,
        colors: Sequence[str] = DEFAULT_FOOD_COLORS,
        rng: Optional[random.Random] = None,
        position: Optional[Tile] = None
    ):
        if not colors:
            raise ValueError("Food needs at least one colour.")
        self.width = width
        self.height = height
        self.colors = tuple(colors)
        self.rng = rng or random.Random()
        self.color = self.colors[0]
        self.position = Tile(0, 0)
        if position is None:
            self.change_position()
        else:
            self.position = Tile(*position)

    def change_position(self, avoid: Collection[Tile] = ()):
        """
        Move the food to a random tile and pick a new colour.

        Tiles in `avoid` are skipped while any free tile remains; on a full
        board the food is placed anywhere.
        """
        free = None
        if avoid:
            blocked = set(avoid)
            free = [
                Tile(x, y)
                for x in range(self.width)
                for y in range(self.height)
                if Tile(x, y) not in blocked
            ]

        if free:
            self.position = self.rng.choice(free)
        else:
            self.position = Tile(
                self.rng.randrange(self.width),
                self.rng.randrange(self.height)
            )
        self.color = self.rng.choice(self.colors)

    def __repr__(self):
        return f"<Food position={tuple(self.position)}, color={self.color}>"
