#!/usr/bin/env python3
"""
Play Snake in a pygame window

Controls:
    Arrow keys / WASD   steer
    Space               start, pause and resume
    Esc                 quit

Usage:
    python -m snake_arcade.cli.play_game
    python -m snake_arcade.cli.play_game --width 20 --height 20 --interval 85
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import pygame  # noqa: E402

from snake_arcade.cli.common import add_config_arguments, config_from_args  # noqa: E402
from snake_arcade.domain.constants import (  # noqa: E402
    KEY_SPACE, KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN,
    KEY_A, KEY_D, KEY_S, KEY_W,
)
from snake_arcade.game import SnakeGame  # noqa: E402
from snake_arcade.services.video_generator import FrameRenderer  # noqa: E402

logger = logging.getLogger(__name__)

# Event polling rate; ticks are paced by the game's own ticker
POLL_FPS = 240
UNMAPPED_KEY = 0

PYGAME_KEYS = {
    pygame.K_SPACE: KEY_SPACE,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_UP: KEY_UP,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_a: KEY_A,
    pygame.K_d: KEY_D,
    pygame.K_s: KEY_S,
    pygame.K_w: KEY_W,
}


class PygameWindow:
    """Shows FrameRenderer images in a pygame window."""

    def __init__(self, renderer: FrameRenderer, size):
        self.renderer = renderer
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Snake")
        self._shown = None

    def refresh(self):
        image = self.renderer.last_image
        if image is None or image is self._shown:
            return
        surface = pygame.image.frombytes(image.tobytes(), image.size, "RGB")
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()
        self._shown = image


def run(game: SnakeGame, window: PygameWindow):
    clock = pygame.time.Clock()
    game.init()
    window.refresh()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    game.on_key_down(PYGAME_KEYS.get(event.key, UNMAPPED_KEY))

        game.ticker.run_pending()
        window.refresh()
        clock.tick(POLL_FPS)

    game.ticker.stop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Play Snake in a pygame window',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
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
        config = config_from_args(args)
        pygame.init()
        renderer = FrameRenderer(config.background_color, config.text_color)
        window = PygameWindow(
            renderer,
            (config.board_width * config.tile_size, config.board_height * config.tile_size)
        )
        game = SnakeGame(config, renderer=renderer)
        run(game, window)
        logger.info(f"Session over, high score {game.state.high_score}")
        return 0

    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1
    finally:
        pygame.quit()


if __name__ == '__main__':
    sys.exit(main())
