"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

from .constants import Direction, RIGHT
from .tile import Tile


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        tiles: deque of Tile from head at index 0 to tail at the end
        pending_growth: when set, the next move keeps the tail
        color: fill colour handed to the renderer
        block_reverse: reject turning straight back into the neck
    """

    def __init__(
        self,
        tiles: Iterable[Tuple[int, int]],
        direction: Direction = RIGHT,
        color: str = "#4F7022",
        block_reverse: bool = True
    ):
        self.tiles = deque(Tile(x, y) for x, y in tiles)
        if not self.tiles:
            raise ValueError("A snake needs at least one tile.")
        self._direction = direction
        self._moved_direction = direction
        self.pending_growth = False
        self.color = color
        self.block_reverse = block_reverse

    @property
    def head(self) -> Tile:
        """Return the head position (first element)."""
        return self.tiles[0]

    @property
    def length(self) -> int:
        return len(self.tiles)

    @property
    def direction(self) -> Direction:
        return self._direction

    @direction.setter
    def direction(self, value: Direction):
        # Reversing the last move is a no-op
        if self.block_reverse and value == self._moved_direction.opposite:
            return
        self._direction = value

    def face(self, direction: Direction):
        """Set the direction unconditionally, used when the game restarts."""
        self._direction = direction
        self._moved_direction = direction

    def move(self):
        """Advance one cell, growing by one tile if growth is pending."""
        self.tiles.appendleft(self.head.step(self._direction))
        self._moved_direction = self._direction
        if self.pending_growth:
            self.pending_growth = False
        else:
            self.tiles.pop()

    def check_self_collision(self) -> bool:
        head = self.head
        return any(tile == head for tile in list(self.tiles)[1:])

    def set_tail(self, x: int, y: int):
        """Shrink the snake back to a single tile at (x, y)."""
        self.tiles = deque([Tile(x, y)])
        self.pending_growth = False

    def __repr__(self):
        return f"<Snake head={tuple(self.head)}, length={self.length}, direction={self._direction.value}>"
