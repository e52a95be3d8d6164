"""
Renderer interface for the game controller.
"""

import logging

from snake_arcade.domain.game_state import RenderSnapshot

logger = logging.getLogger(__name__)


class Renderer:
    """
    Base class/interface for anything that displays the game.

    The controller calls render() with a fresh snapshot whenever the
    board needs repainting.
    """

    def render(self, snapshot: RenderSnapshot):
        raise NotImplementedError


class TextRenderer(Renderer):
    """
    Renders snapshots as text boards:
    . = empty space
    F = food
    H = snake head
    S = snake body
    """

    def __init__(self):
        self.last_frame = ""

    def render(self, snapshot: RenderSnapshot):
        self.last_frame = self.draw(snapshot)
        logger.debug("\n" + self.last_frame)

    @staticmethod
    def draw(snapshot: RenderSnapshot) -> str:
        board = [['.' for _ in range(snapshot.width)] for _ in range(snapshot.height)]

        fx, fy = snapshot.food_position
        if 0 <= fx < snapshot.width and 0 <= fy < snapshot.height:
            board[fy][fx] = 'F'

        for idx, (x, y) in enumerate(snapshot.snake_tiles):
            if 0 <= x < snapshot.width and 0 <= y < snapshot.height:
                board[y][x] = 'H' if idx == 0 else 'S'

        lines = [' '.join(row) for row in board]
        lines.append(snapshot.score_text)
        if snapshot.status_text:
            lines.append(snapshot.status_text)
        return "\n".join(lines)
