"""
Tests for the headless CLI tools - record_game and generate_video.
"""

import glob
import json
import random
import sys
import os
from unittest.mock import Mock, patch

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_arcade.cli import generate_video, record_game
from snake_arcade.config import GameConfig
from snake_arcade.domain import Tile
from snake_arcade.game import SnakeGame
from snake_arcade.players import RandomPlayer, ScriptedPlayer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("SNAKE_"):
            monkeypatch.delenv(key)
    # Keep find_dotenv away from any .env in the working tree
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestRunHeadless:
    """Tests for record_game.run_headless."""

    def test_scripted_run(self):
        game = SnakeGame(GameConfig(board_width=10, board_height=10, seed=2), record_history=True)
        game.board.food.position = Tile(9, 9)
        player = ScriptedPlayer.from_script("space . down")

        record_game.run_headless(game, player, ticks=3)

        # space: key step + timer tick, idle tick, down: key step + timer tick
        assert game.state.started is True
        assert list(game.board.snake.tiles) == [(3, 2)]

    def test_random_player_keeps_playing(self):
        game = SnakeGame(GameConfig(board_width=8, board_height=8, seed=3), record_history=True)
        player = RandomPlayer(press_probability=0.5, rng=random.Random(3))

        record_game.run_headless(game, player, ticks=300, auto_resume=True)

        assert game.state.started is True
        assert len(game.history) > 300
        for frame in game.history:
            assert frame.width == 8


class TestRecordGameMain:
    """Tests for record_game.main."""

    def test_writes_replay_without_video(self, tmp_path):
        code = record_game.main([
            "--player", "scripted",
            "--script", "space . . down . . right",
            "--ticks", "10",
            "--no-video",
            "--replay-dir", str(tmp_path),
            "--width", "10",
            "--height", "10",
            "--seed", "3",
        ])
        assert code == 0

        replays = glob.glob(str(tmp_path / "snake_game_*.json"))
        assert len(replays) == 1
        with open(replays[0]) as f:
            data = json.load(f)
        assert data["metadata"]["board"]["width"] == 10
        assert len(data["frames"]) > 0

    def test_writes_gif(self, tmp_path):
        output = tmp_path / "demo.gif"
        code = record_game.main([
            "--ticks", "20",
            "--replay-dir", str(tmp_path),
            "--output", str(output),
            "--width", "8",
            "--height", "8",
            "--seed", "1",
        ])
        assert code == 0
        assert output.exists()

    def test_scripted_player_needs_script(self, tmp_path):
        code = record_game.main(["--player", "scripted", "--no-video", "--replay-dir", str(tmp_path)])
        assert code == 1

    def test_invalid_ticks(self, tmp_path):
        assert record_game.main(["--ticks", "0", "--replay-dir", str(tmp_path)]) == 1

    def test_invalid_board_from_environment(self, tmp_path, clean_env):
        clean_env.setenv("SNAKE_TILE_SIZE", "0")
        assert record_game.main(["--no-video", "--replay-dir", str(tmp_path)]) == 1


class TestGenerateVideoMain:
    """Tests for generate_video.main."""

    def test_renders_saved_replay(self, tmp_path):
        game = SnakeGame(GameConfig(board_width=8, board_height=8, seed=5), record_history=True)
        record_game.run_headless(game, ScriptedPlayer.from_script("space"), ticks=5)
        replay_path = game.save_history_to_json(directory=str(tmp_path))

        output = tmp_path / "replay.gif"
        code = generate_video.main(["--local", replay_path, "--output", str(output)])

        assert code == 0
        assert output.exists()

    def test_by_game_id(self, tmp_path):
        game = SnakeGame(GameConfig(board_width=8, board_height=8), game_id="abc", record_history=True)
        record_game.run_headless(game, ScriptedPlayer.from_script("space"), ticks=2)
        game.save_history_to_json(directory=str(tmp_path))

        output = tmp_path / "abc.gif"
        code = generate_video.main(["abc", "--replay-dir", str(tmp_path), "--output", str(output), "--fps", "5"])
        assert code == 0
        assert output.exists()

    def test_replay_colours_reach_the_video(self, tmp_path):
        config = GameConfig(board_width=8, board_height=8, background_color="navy", text_color="#ff0")
        game = SnakeGame(config, game_id="blue", record_history=True)
        record_game.run_headless(game, ScriptedPlayer.from_script("space"), ticks=2)
        replay_path = game.save_history_to_json(directory=str(tmp_path))

        generator = Mock()
        generator.generate_video.return_value = str(tmp_path / "blue.gif")
        with patch.object(generate_video, "SnakeVideoGenerator", return_value=generator) as video_cls:
            code = generate_video.main(["--local", replay_path, "--output", str(tmp_path / "blue.gif")])

        assert code == 0
        renderer = video_cls.call_args.kwargs["renderer"]
        assert renderer.background_color == (0, 0, 128)
        assert renderer.text_color == (255, 255, 0)

    def test_build_renderer_uses_metadata_colours(self):
        renderer = generate_video.build_renderer({"background_color": "#102030", "text_color": "red"})
        assert renderer.background_color == (16, 32, 48)
        assert renderer.text_color == (255, 0, 0)

    def test_build_renderer_defaults_for_older_replays(self):
        renderer = generate_video.build_renderer({})
        assert renderer.background_color == (0, 0, 0)
        assert renderer.text_color == (255, 255, 255)

    def test_missing_replay(self, tmp_path):
        assert generate_video.main(["--local", str(tmp_path / "missing.json")]) == 1

    def test_extract_game_id_from_filename(self):
        assert generate_video.extract_game_id_from_filename("x/snake_game_abc-123.json") == "abc-123"
        assert generate_video.extract_game_id_from_filename("other.json") == "other"
