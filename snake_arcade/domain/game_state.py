"""
GameState entity and the render snapshot handed to renderers.
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Tuple

from .constants import START_TEXT
from .tile import Tile


@dataclass
class GameState:
    """
    Session state owned by the game controller.

    Attributes:
        score: points scored since the last reset
        high_score: best score of this session, never decreases
        paused: when set, ticks skip the simulation and the redraw
        started: set once the player has started the ticker
        status_text: message shown over the board
    """

    score: int = 0
    high_score: int = 0
    paused: bool = True
    started: bool = False
    status_text: str = START_TEXT

    def add_score(self, points: int):
        self.score += points
        if self.score > self.high_score:
            self.high_score = self.score

    def __repr__(self):
        return (
            f"<GameState score={self.score}, high_score={self.high_score}, "
            f"paused={self.paused}, started={self.started}>"
        )


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything a renderer needs to paint one frame."""

    width: int
    height: int
    tile_size: int
    snake_tiles: Tuple[Tile, ...]
    food_position: Tile
    food_color: str
    snake_color: str
    score: int
    high_score: int
    status_text: str
    paused: bool = field(default=False)

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}  Highscore: {self.high_score}"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["snake_tiles"] = [list(tile) for tile in self.snake_tiles]
        data["food_position"] = list(self.food_position)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderSnapshot":
        return cls(
            width=data["width"],
            height=data["height"],
            tile_size=data["tile_size"],
            snake_tiles=tuple(Tile(x, y) for x, y in data["snake_tiles"]),
            food_position=Tile(*data["food_position"]),
            food_color=data["food_color"],
            snake_color=data["snake_color"],
            score=data["score"],
            high_score=data["high_score"],
            status_text=data.get("status_text", ""),
            paused=data.get("paused", False)
        )
