"""
Snake game controller.

SnakeGame owns the Board and the GameState, advances the simulation on each
tick, maps key codes to directions and hands snapshots to a renderer.
"""

import json
import logging
import os
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from snake_arcade.config import GameConfig
from snake_arcade.domain.board import Board
from snake_arcade.domain.constants import (
    KEY_TO_DIRECTION,
    PAUSE_KEY,
    RESUME_TEXT,
    GAME_OVER_TEXT,
)
from snake_arcade.domain.game_state import GameState, RenderSnapshot
from snake_arcade.services.renderer import Renderer
from snake_arcade.services.ticker import Ticker

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (snake + food)
      - Score, high score, pause and start flags
      - The ticker that drives tick()
      - The renderer that receives a snapshot after every drawn tick
      - Optional snapshot history for replays
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        renderer: Optional[Renderer] = None,
        ticker: Optional[Ticker] = None,
        rng: Optional[random.Random] = None,
        game_id: Optional[str] = None,
        record_history: bool = False
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.board = Board(
            self.config.board_width,
            self.config.board_height,
            self.config.tile_size,
            start=self.config.restart_position,
            direction=self.config.restart_direction,
            snake_color=self.config.snake_color,
            food_colors=self.config.food_colors,
            block_reverse=self.config.block_reverse,
            food_avoids_snake=self.config.food_avoids_snake,
            rng=self.rng
        )
        self.state = GameState()
        self.renderer = renderer
        self.ticker = ticker or Ticker(self.config.tick_interval_seconds)

        self.game_id = game_id or str(uuid.uuid4())
        self.start_time = time.time()
        self.record_history = record_history
        self.history: List[RenderSnapshot] = []
        self.games_played = 0
        self.tick_count = 0

    def init(self):
        """Paint the start screen."""
        logger.info(
            f"Game {self.game_id}: {self.board.width}x{self.board.height} board, "
            f"{self.config.tick_interval_ms} ms ticks"
        )
        self._redraw()

    # ---------- Input ----------
    def on_key_down(self, key_code: int):
        """
        Handle one key press.

        Direction keys steer the snake, the pause key starts the ticker on
        first use and toggles pause. With step_on_input enabled every key
        press also runs one tick straight away.
        """
        direction = KEY_TO_DIRECTION.get(key_code)
        if direction is not None:
            self.board.snake.direction = direction
        elif key_code == PAUSE_KEY:
            if not self.state.started:
                self.start()
            self.toggle_pause()

        if self.config.step_on_input:
            self.tick()

    def start(self):
        if self.state.started:
            return
        self.state.started = True
        self.ticker.start(self.tick)
        logger.info(f"Game {self.game_id} started")

    def toggle_pause(self):
        self.state.paused = not self.state.paused
        if self.state.paused:
            self.state.status_text = RESUME_TEXT
            logger.debug("Paused")
            self._redraw()
        else:
            self.state.status_text = ""
            logger.debug("Resumed")

    # ---------- Simulation ----------
    def tick(self):
        """
        Execute one simulation step:
          1) End the game if the snake has crashed
          2) If running, eat food under the head (score, relocate, grow)
          3) Move the snake and redraw
        """
        self.tick_count += 1
        if self.check_if_snake_crashed():
            self.game_over()

        if self.state.paused:
            return

        if self.board.check_snake_food_collision():
            self.state.add_score(self.config.score_increment)
            self.board.relocate_food()
            self.board.snake.pending_growth = True
            logger.debug(
                f"Food eaten, score {self.state.score}, food moved to {tuple(self.board.food.position)}"
            )

        self.board.snake.move()
        self._redraw()

    def check_if_snake_crashed(self) -> bool:
        return self.board.snake.check_self_collision() or self.board.check_snake_wall_collision()

    def game_over(self):
        self.state.status_text = GAME_OVER_TEXT.format(score=self.state.score)
        self.games_played += 1
        logger.info(
            f"Game over after {self.tick_count} ticks: score {self.state.score}, "
            f"high score {self.state.high_score}"
        )
        self._redraw()
        self.reset()

    def reset(self):
        """Back to a single-tile snake at the restart position, paused. The high score is kept."""
        x, y = self.config.restart_position
        self.state.score = 0
        self.state.paused = True
        self.board.snake.set_tail(x, y)
        self.board.snake.face(self.config.restart_direction)

    # ---------- Output ----------
    def snapshot(self) -> RenderSnapshot:
        """Return an immutable view of the current frame."""
        return RenderSnapshot(
            width=self.board.width,
            height=self.board.height,
            tile_size=self.board.tile_size,
            snake_tiles=tuple(self.board.snake.tiles),
            food_position=self.board.food.position,
            food_color=self.board.food.color,
            snake_color=self.board.snake.color,
            score=self.state.score,
            high_score=self.state.high_score,
            status_text=self.state.status_text,
            paused=self.state.paused
        )

    def _redraw(self):
        snapshot = self.snapshot()
        if self.record_history:
            self.history.append(snapshot)
        if self.renderer is not None:
            self.renderer.render(snapshot)

    # ---------- Replays ----------
    def serialize_history(self) -> List[Dict[str, Any]]:
        """Convert the recorded snapshots to JSON-serialisable dicts."""
        return [snapshot.to_dict() for snapshot in self.history]

    def save_history_to_json(self, filename: Optional[str] = None, directory: str = "completed_games") -> str:
        """Write the replay to `directory` and return the file path."""
        if filename is None:
            filename = f"snake_game_{self.game_id}.json"

        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "board": {
                "width": self.board.width,
                "height": self.board.height,
                "tile_size": self.board.tile_size,
            },
            "ticks": self.tick_count,
            "games_played": self.games_played,
            "high_score": self.state.high_score,
            "tick_interval_ms": self.config.tick_interval_ms,
            "background_color": self.config.background_color,
            "text_color": self.config.text_color,
        }

        data = {
            "metadata": metadata,
            "frames": self.serialize_history()
        }

        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info(f"Saved replay with {len(self.history)} frames to {path}")
        return path


def load_replay(path: str) -> Dict[str, Any]:
    """Load a replay file written by SnakeGame.save_history_to_json."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Replay file not found: {path}")
    with open(path, "r") as f:
        data = json.load(f)
    if "frames" not in data:
        raise ValueError(f"{path} is not a snake replay (missing 'frames')")
    data["frames"] = [RenderSnapshot.from_dict(frame) for frame in data["frames"]]
    return data
