"""
Game configuration.

Values come from SNAKE_* environment variables (a local .env file is loaded
with python-dotenv) and can be overridden by CLI flags.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple

from dotenv import load_dotenv, find_dotenv
from PIL import ImageColor

from snake_arcade.domain.constants import (
    Direction,
    RIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_TILE_SIZE,
    DEFAULT_TICK_INTERVAL_MS,
    DEFAULT_SCORE_INCREMENT,
)
from snake_arcade.domain.food import DEFAULT_FOOD_COLORS

logger = logging.getLogger(__name__)

ENV_PREFIX = "SNAKE_"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_position(value: str) -> Tuple[int, int]:
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected a position like '0,0', got '{value}'")
    return int(parts[0]), int(parts[1])


def _env_colors(value: str) -> Tuple[str, ...]:
    return tuple(c.strip() for c in value.split(",") if c.strip())


@dataclass(frozen=True)
class GameConfig:
    """
    Tunables for one game session.

    Attributes:
        board_width, board_height: grid size in tiles
        tile_size: pixel size of a tile
        tick_interval_ms: period of the fixed-interval ticker
        score_increment: points per eaten food
        restart_position: tile the snake restarts on after game over
        restart_direction: heading after game over
        block_reverse: ignore turns straight back into the neck
        food_avoids_snake: keep relocated food off the snake
        step_on_input: key presses run one extra tick immediately
        snake_color, food_colors, background_color, text_color: palette
        seed: optional seed for food placement
    """

    board_width: int = DEFAULT_BOARD_WIDTH
    board_height: int = DEFAULT_BOARD_HEIGHT
    tile_size: int = DEFAULT_TILE_SIZE
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    score_increment: int = DEFAULT_SCORE_INCREMENT
    restart_position: Tuple[int, int] = (0, 0)
    restart_direction: Direction = RIGHT
    block_reverse: bool = True
    food_avoids_snake: bool = False
    step_on_input: bool = True
    snake_color: str = "#4F7022"
    food_colors: Tuple[str, ...] = field(default=DEFAULT_FOOD_COLORS)
    background_color: str = "#000000"
    text_color: str = "#FFFFFF"
    seed: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.board_width}x{self.board_height}"
            )
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if self.score_increment < 0:
            raise ValueError(f"score_increment cannot be negative, got {self.score_increment}")
        x, y = self.restart_position
        if not (0 <= x < self.board_width and 0 <= y < self.board_height):
            raise ValueError(f"Restart position {self.restart_position} is outside the board")
        if not self.food_colors:
            raise ValueError("food_colors needs at least one colour")
        colors = [
            ("snake_color", self.snake_color),
            ("background_color", self.background_color),
            ("text_color", self.text_color),
        ] + [("food_colors", c) for c in self.food_colors]
        for name, color in colors:
            try:
                ImageColor.getrgb(color)
            except (ValueError, AttributeError, TypeError) as e:
                raise ValueError(f"Invalid colour for {name}: {color!r}") from e

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        Recognised variables: SNAKE_BOARD_WIDTH, SNAKE_BOARD_HEIGHT,
        SNAKE_TILE_SIZE, SNAKE_TICK_INTERVAL_MS, SNAKE_SCORE_INCREMENT,
        SNAKE_RESTART_POSITION ("x,y"), SNAKE_RESTART_DIRECTION,
        SNAKE_BLOCK_REVERSE, SNAKE_FOOD_AVOIDS_SNAKE, SNAKE_STEP_ON_INPUT,
        SNAKE_SNAKE_COLOR, SNAKE_FOOD_COLORS (comma separated),
        SNAKE_BACKGROUND_COLOR, SNAKE_TEXT_COLOR, SNAKE_SEED.
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        parsers = {
            "board_width": int,
            "board_height": int,
            "tile_size": int,
            "tick_interval_ms": int,
            "score_increment": int,
            "restart_position": _env_position,
            "restart_direction": Direction.parse,
            "block_reverse": _env_bool,
            "food_avoids_snake": _env_bool,
            "step_on_input": _env_bool,
            "snake_color": str,
            "food_colors": _env_colors,
            "background_color": str,
            "text_color": str,
            "seed": int,
        }

        values = {}
        for name, parse in parsers.items():
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is None or raw.strip() == "":
                continue
            try:
                values[name] = parse(raw)
            except ValueError as e:
                raise ValueError(f"Invalid value for {ENV_PREFIX + name.upper()}: {e}") from e

        if values:
            logger.debug(f"Loaded config overrides from environment: {sorted(values)}")
        return cls(**values)
