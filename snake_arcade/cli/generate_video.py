#!/usr/bin/env python3
"""
CLI tool to generate videos from Snake game replays

Usage:
    python -m snake_arcade.cli.generate_video <game_id>
    python -m snake_arcade.cli.generate_video --local <path_to_replay.json>

Examples:
    # Generate from local completed_games directory
    python -m snake_arcade.cli.generate_video abc-123-def-456

    # Generate from specific local file
    python -m snake_arcade.cli.generate_video --local ../completed_games/snake_game_xyz.json

    # Custom output path (.gif or .mp4)
    python -m snake_arcade.cli.generate_video abc-123 --output ./my_game.gif

    # Custom frame rate
    python -m snake_arcade.cli.generate_video abc-123 --fps 10
"""

import os
import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from dotenv import load_dotenv  # noqa: E402

from snake_arcade.game import load_replay  # noqa: E402
from snake_arcade.services.video_generator import (  # noqa: E402
    ColorScheme,
    FrameRenderer,
    SnakeVideoGenerator,
    get_video_local_path,
)

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def extract_game_id_from_filename(file_path: str) -> str:
    """Extract game ID from filename"""
    # Expected format: snake_game_<game_id>.json
    filename = Path(file_path).stem
    if filename.startswith('snake_game_'):
        return filename.replace('snake_game_', '')
    return filename


def build_renderer(metadata: dict) -> FrameRenderer:
    """Frame renderer using the colours the replay was recorded with"""
    return FrameRenderer(
        background_color=metadata.get("background_color") or ColorScheme.BACKGROUND,
        text_color=metadata.get("text_color") or ColorScheme.TEXT
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate GIF or MP4 videos from Snake game replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        'game_id',
        nargs='?',
        help='Game ID to load from the completed_games directory'
    )
    input_group.add_argument(
        '--local',
        type=str,
        help='Path to local replay JSON file'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file path, .gif or .mp4 (default: completed_games/<game_id>_replay.mp4)'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=None,
        help='Frames per second (default: derived from the replay tick interval)'
    )
    parser.add_argument(
        '--replay-dir',
        type=str,
        default='completed_games',
        help='Directory holding replays (default: completed_games)'
    )
    return parser


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    args = build_parser().parse_args(argv)

    try:
        if args.local:
            replay_path = args.local
            game_id = extract_game_id_from_filename(args.local)
        else:
            game_id = args.game_id
            replay_path = os.path.join(args.replay_dir, f"snake_game_{game_id}.json")

        logger.info(f"Loading replay from {replay_path}")
        replay = load_replay(replay_path)

        metadata = replay.get("metadata", {})
        fps = args.fps
        if fps is None:
            interval_ms = metadata.get("tick_interval_ms") or 50
            fps = max(1, round(1000 / interval_ms))

        output = args.output or get_video_local_path(game_id, directory=args.replay_dir)

        generator = SnakeVideoGenerator(fps=fps, renderer=build_renderer(metadata))
        logger.info(f"Generating video for game {game_id}...")
        video_path = generator.generate_video(replay["frames"], output)

        logger.info(f"[OK] Video generated successfully: {video_path}")
        return 0

    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
