#!/usr/bin/env python3
"""
Run a headless Snake game with a scripted or random player and record it

Usage:
    python -m snake_arcade.cli.record_game --player random --ticks 500
    python -m snake_arcade.cli.record_game --player scripted --script "space . . down . . left"

Examples:
    # Random player, 1000 ticks, GIF recording
    python -m snake_arcade.cli.record_game --ticks 1000 --output ./demo.gif

    # Replay JSON only, no video
    python -m snake_arcade.cli.record_game --no-video

    # Small board, fixed seed
    python -m snake_arcade.cli.record_game --width 10 --height 10 --seed 7
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from snake_arcade.cli.common import add_config_arguments, config_from_args  # noqa: E402
from snake_arcade.domain.constants import PAUSE_KEY  # noqa: E402
from snake_arcade.game import SnakeGame  # noqa: E402
from snake_arcade.players import Player, RandomPlayer, ScriptedPlayer, get_player_class, AVAILABLE_VARIANTS  # noqa: E402
from snake_arcade.services.renderer import TextRenderer  # noqa: E402
from snake_arcade.services.video_generator import SnakeVideoGenerator, FrameRenderer, get_video_local_path  # noqa: E402

logger = logging.getLogger(__name__)


def run_headless(game: SnakeGame, player: Player, ticks: int, auto_resume: bool = False) -> SnakeGame:
    """
    Drive `game` for `ticks` timer ticks without a real clock.

    Before each tick the player may press one key. With auto_resume the
    pause key is pressed whenever the game sits paused, so a random player
    keeps playing after each game over.
    """
    game.init()
    for _ in range(ticks):
        if auto_resume and game.state.paused:
            game.on_key_down(PAUSE_KEY)
        key = player.get_key(game.snapshot())
        if key is not None:
            game.on_key_down(key)
        game.tick()
    return game


def build_player(args) -> Player:
    player_class = get_player_class(args.player)
    if player_class is ScriptedPlayer:
        if not args.script:
            raise ValueError("--script is required for the scripted player")
        return ScriptedPlayer.from_script(args.script)
    if player_class is RandomPlayer:
        return RandomPlayer(press_probability=args.press_probability)
    return player_class()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Run a headless Snake game and record it',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--player', default='random', choices=AVAILABLE_VARIANTS, help='Input source (default: random)')
    parser.add_argument('--script', type=str, help='Key script for the scripted player, e.g. "space . left . up"')
    parser.add_argument('--press-probability', type=float, default=0.3, help='Chance the random player presses a key each tick')
    parser.add_argument('--ticks', type=int, default=500, help='Number of timer ticks to run (default: 500)')
    parser.add_argument('--output', '-o', type=str, help='Video path, .gif or .mp4 (default: completed_games/<game_id>_replay.gif)')
    parser.add_argument('--replay-dir', type=str, default='completed_games', help='Directory for the replay JSON')
    parser.add_argument('--no-video', action='store_true', help='Only write the replay JSON')
    parser.add_argument('--text', action='store_true', help='Log every frame as a text board')
    parser.add_argument('--log-level', default='INFO', help='Logging level (default: INFO)')
    add_config_arguments(parser)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.ticks <= 0:
            raise ValueError(f"--ticks must be positive, got {args.ticks}")

        config = config_from_args(args)
        player = build_player(args)
        renderer = TextRenderer() if args.text else None
        game = SnakeGame(config, renderer=renderer, record_history=True)

        logger.info(f"Running {args.ticks} ticks with the {player.name} player")
        run_headless(game, player, args.ticks, auto_resume=isinstance(player, RandomPlayer))
        logger.info(
            f"Finished: {game.games_played} game(s) over, high score {game.state.high_score}, "
            f"{len(game.history)} frames"
        )

        game.save_history_to_json(directory=args.replay_dir)

        if not args.no_video:
            output = args.output or get_video_local_path(game.game_id, extension="gif", directory=args.replay_dir)
            fps = max(1, round(1000 / config.tick_interval_ms))
            generator = SnakeVideoGenerator(
                fps=fps,
                renderer=FrameRenderer(config.background_color, config.text_color)
            )
            generator.generate_video(game.history, output)

        return 0

    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
