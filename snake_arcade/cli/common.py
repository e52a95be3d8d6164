"""
Argument helpers shared by the Snake Arcade CLI tools.
"""

import argparse

from snake_arcade.config import GameConfig
from snake_arcade.domain.constants import Direction


def add_config_arguments(parser: argparse.ArgumentParser):
    """Add flags that override GameConfig values loaded from the environment."""
    group = parser.add_argument_group('game settings (override SNAKE_* environment variables)')
    group.add_argument('--width', type=int, dest='board_width', help='Board width in tiles')
    group.add_argument('--height', type=int, dest='board_height', help='Board height in tiles')
    group.add_argument('--tile-size', type=int, help='Tile size in pixels')
    group.add_argument('--interval', type=int, dest='tick_interval_ms', help='Tick interval in milliseconds')
    group.add_argument('--score-increment', type=int, help='Points per eaten food')
    group.add_argument('--seed', type=int, help='Seed for food placement')
    group.add_argument(
        '--restart-direction',
        type=Direction.parse,
        help='Heading after a game over (up, down, left, right)'
    )
    group.add_argument(
        '--allow-reverse',
        action='store_const',
        const=False,
        dest='block_reverse',
        help='Accept turns straight back into the body'
    )
    group.add_argument(
        '--food-avoids-snake',
        action='store_const',
        const=True,
        help='Never place food on the snake'
    )
    group.add_argument(
        '--no-step-on-input',
        action='store_const',
        const=False,
        dest='step_on_input',
        help='Key presses wait for the next tick instead of stepping immediately'
    )


def config_from_args(args: argparse.Namespace) -> GameConfig:
    base = GameConfig.from_env()
    return base.with_overrides(
        board_width=args.board_width,
        board_height=args.board_height,
        tile_size=args.tile_size,
        tick_interval_ms=args.tick_interval_ms,
        score_increment=args.score_increment,
        seed=args.seed,
        restart_direction=args.restart_direction,
        block_reverse=args.block_reverse,
        food_avoids_snake=args.food_avoids_snake,
        step_on_input=args.step_on_input,
    )
