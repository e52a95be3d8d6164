"""
Tile value type - one grid cell addressed by integer coordinates.
"""

from typing import NamedTuple

from .constants import Direction


class Tile(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Tile":
        """Return the neighbouring tile one cell away in `direction`."""
        dx, dy = direction.offset
        return Tile(self.x + dx, self.y + dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height
