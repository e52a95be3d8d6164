"""
Board entity - spatial rules binding the snake and the food to a grid.
"""

import random
from typing import Optional, Sequence, Tuple

from .constants import Direction, RIGHT
from .food import Food, DEFAULT_FOOD_COLORS
from .snake import Snake


class Board:
    """
    A fixed-size grid owning one Snake and one Food.

    Attributes:
        width, height: grid dimensions in tiles
        tile_size: pixel size of one tile, used by renderers
        snake: the Snake on this board
        food: the Food on this board
        food_avoids_snake: keep relocated food off the snake's tiles
    """

    def __init__(
        self,
        width: int,
        height: int,
        tile_size: int,
        start: Tuple[int, int] = (0, 0),
        direction: Direction = RIGHT,
        snake_color: str = "#4F7022",
        food_colors: Sequence[str] = DEFAULT_FOOD_COLORS,
        block_reverse: bool = True,
        food_avoids_snake: bool = False,
        rng: Optional[random.Random] = None
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")
        if tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {tile_size}.")

        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.food_avoids_snake = food_avoids_snake

        self.snake = Snake(
            [start],
            direction=direction,
            color=snake_color,
            block_reverse=block_reverse
        )
        self.food = Food(width, height, colors=food_colors, rng=rng, position=(0, 0))
        self.relocate_food()

    def check_snake_food_collision(self) -> bool:
        return self.snake.head == self.food.position

    def check_snake_wall_collision(self) -> bool:
        return not self.snake.head.in_bounds(self.width, self.height)

    def relocate_food(self):
        """Give the food a new random position, honouring the placement rule."""
        if self.food_avoids_snake:
            self.food.change_position(avoid=self.snake.tiles)
        else:
            self.food.change_position()
