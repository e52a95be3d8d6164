"""
Frame rendering and video generation for Snake games

This service turns render snapshots into images and recordings by:
1. Rendering each frame using PIL (Pillow)
2. Encoding frames to GIF with Pillow or to MP4 with MoviePy/FFmpeg
3. Saving the result to the local completed_games directory

The rendering follows the classic canvas look:
- Black board with one filled square per tile
- Food square in its current colour
- Score line near the bottom, status text in the middle
"""

import os
import logging
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont
import numpy as np

from snake_arcade.domain.game_state import RenderSnapshot
from snake_arcade.services.renderer import Renderer

logger = logging.getLogger(__name__)

DEFAULT_FPS = 20  # 50 ms ticks
STATUS_FONT_SIZE = 25
SCORE_FONT_SIZE = 16
TEXT_LINE_SPACING = 50
FONT_CANDIDATES = ("DejaVuSans.ttf", "Arial.ttf", "/System/Library/Fonts/Helvetica.ttc")


class ColorScheme:
    """Default colours for anything the snapshot does not carry"""

    BACKGROUND = "#000000"
    TEXT = "#FFFFFF"


def color_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert any Pillow colour string (hex, short hex, name, rgb()) to an RGB tuple"""
    return ImageColor.getrgb(color)[:3]


def _load_font(size: int):
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


class FrameRenderer(Renderer):
    """Paints snapshots onto Pillow images, keeping the latest one."""

    def __init__(
        self,
        background_color: str = ColorScheme.BACKGROUND,
        text_color: str = ColorScheme.TEXT
    ):
        self.background_color = color_to_rgb(background_color)
        self.text_color = color_to_rgb(text_color)
        self.font_status = _load_font(STATUS_FONT_SIZE)
        self.font_score = _load_font(SCORE_FONT_SIZE)
        self.last_image: Optional[Image.Image] = None

    def render(self, snapshot: RenderSnapshot):
        self.last_image = self.render_frame(snapshot)

    def render_frame(self, snapshot: RenderSnapshot) -> Image.Image:
        """Render a single frame of the game"""
        size = snapshot.tile_size
        canvas_width = snapshot.width * size
        canvas_height = snapshot.height * size

        img = Image.new('RGB', (canvas_width, canvas_height), self.background_color)
        draw = ImageDraw.Draw(img)

        fx, fy = snapshot.food_position
        self._draw_cell(draw, fx * size, fy * size, size, color_to_rgb(snapshot.food_color))

        snake_color = color_to_rgb(snapshot.snake_color)
        for x, y in snapshot.snake_tiles:
            self._draw_cell(draw, x * size, y * size, size, snake_color)

        # Score sits four lines below the centre, clamped onto the canvas
        score_y = min(canvas_height / 2 + 4 * TEXT_LINE_SPACING, canvas_height - SCORE_FONT_SIZE)
        self._draw_centered_text(draw, snapshot.score_text, score_y, canvas_width, self.font_score)

        if snapshot.status_text:
            self._draw_centered_text(
                draw, snapshot.status_text, canvas_height / 2, canvas_width, self.font_status
            )

        return img

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        size: int,
        color: Tuple[int, int, int]
    ):
        """Draw a single tile (for snake body or food)"""
        draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color)

    def _draw_centered_text(self, draw: ImageDraw.ImageDraw, text: str, y: float, canvas_width: int, font):
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            (canvas_width // 2 - text_width // 2, int(y - text_height / 2)),
            text,
            fill=self.text_color,
            font=font
        )


class SnakeVideoGenerator:
    """Generate GIF or MP4 recordings from a sequence of snapshots"""

    def __init__(self, fps: int = DEFAULT_FPS, renderer: Optional[FrameRenderer] = None):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.renderer = renderer or FrameRenderer()

    def render_frames(self, snapshots: Sequence[RenderSnapshot]) -> List[Image.Image]:
        frames = []
        for i, snapshot in enumerate(snapshots):
            if i % 100 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(snapshots)}")
            frames.append(self.renderer.render_frame(snapshot))
        return frames

    def generate_video(self, snapshots: Sequence[RenderSnapshot], output_path: str) -> str:
        """
        Render snapshots and encode them to `output_path`.

        The format follows the extension: .gif is written by Pillow, anything
        else (.mp4) by MoviePy.

        Returns:
            Path to the generated file
        """
        if not snapshots:
            raise ValueError("Cannot generate a video without frames")

        frames = self.render_frames(snapshots)
        logger.info(f"Rendered {len(frames)} frames, writing {output_path}")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        if output_path.lower().endswith(".gif"):
            self._write_gif(frames, output_path)
        else:
            self._write_mp4(frames, output_path)

        logger.info(f"Video created successfully at {output_path}")
        return output_path

    def _write_gif(self, frames: List[Image.Image], output_path: str):
        frames[0].save(
            output_path,
            save_all=True,
            append_images=frames[1:],
            duration=int(1000 / self.fps),
            loop=0
        )

    def _write_mp4(self, frames: List[Image.Image], output_path: str):
        # Imported lazily, MoviePy pulls in imageio/ffmpeg on import
        from moviepy import ImageSequenceClip

        clip = ImageSequenceClip([np.array(frame) for frame in frames], fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )


def get_video_local_path(game_id: str, extension: str = "mp4", directory: str = "completed_games") -> str:
    """Local path for a game's recording"""
    return os.path.join(directory, f"{game_id}_replay.{extension}")
