"""
Tests for the text and image renderers and the video generator.
"""

import pytest
import sys
import os
from dataclasses import replace

from PIL import Image

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_arcade.domain import Tile, RenderSnapshot
from snake_arcade.services.renderer import Renderer, TextRenderer
from snake_arcade.services.video_generator import (
    FrameRenderer,
    SnakeVideoGenerator,
    color_to_rgb,
    get_video_local_path,
)


def make_snapshot(snake=((2, 2), (1, 2)), food=(7, 2), status=""):
    return RenderSnapshot(
        width=10,
        height=10,
        tile_size=16,
        snake_tiles=tuple(Tile(*t) for t in snake),
        food_position=Tile(*food),
        food_color="#EA2014",
        snake_color="#4F7022",
        score=2,
        high_score=4,
        status_text=status
    )


def test_color_to_rgb():
    assert color_to_rgb("#EA2014") == (234, 32, 20)
    assert color_to_rgb("#000000") == (0, 0, 0)


def test_color_to_rgb_accepts_names_and_short_hex():
    assert color_to_rgb("green") == (0, 128, 0)
    assert color_to_rgb("#0f0") == (0, 255, 0)
    assert color_to_rgb("White") == (255, 255, 255)


def test_color_to_rgb_rejects_unknown_colour():
    with pytest.raises(ValueError):
        color_to_rgb("not-a-colour")


def test_renderer_base_is_abstract():
    with pytest.raises(NotImplementedError):
        Renderer().render(make_snapshot())


class TestTextRenderer:
    def test_draw_marks_head_body_and_food(self):
        text = TextRenderer.draw(make_snapshot(status="Press space to resume"))
        rows = text.split("\n")
        assert rows[2].split() == [".", "S", "H", ".", ".", ".", ".", "F", ".", "."]
        assert rows[10] == "Score: 2  Highscore: 4"
        assert rows[11] == "Press space to resume"

    def test_out_of_bounds_head_is_skipped(self):
        text = TextRenderer.draw(make_snapshot(snake=((-1, 0), (0, 0))))
        assert text.split("\n")[0].split()[0] == "S"

    def test_render_keeps_last_frame(self):
        renderer = TextRenderer()
        renderer.render(make_snapshot())
        assert "H" in renderer.last_frame


class TestFrameRenderer:
    def test_frame_size_follows_board(self):
        img = FrameRenderer().render_frame(make_snapshot())
        assert img.size == (160, 160)

    def test_tiles_are_painted(self):
        img = FrameRenderer().render_frame(make_snapshot())
        assert img.getpixel((2 * 16 + 8, 2 * 16 + 8)) == color_to_rgb("#4F7022")
        assert img.getpixel((1 * 16 + 8, 2 * 16 + 8)) == color_to_rgb("#4F7022")
        assert img.getpixel((7 * 16 + 8, 2 * 16 + 8)) == color_to_rgb("#EA2014")
        assert img.getpixel((8, 8)) == (0, 0, 0)

    def test_custom_background(self):
        img = FrameRenderer(background_color="#102030").render_frame(make_snapshot())
        assert img.getpixel((8, 8)) == (16, 32, 48)

    def test_named_and_short_hex_colours(self):
        renderer = FrameRenderer(background_color="navy", text_color="#fff")
        assert renderer.background_color == (0, 0, 128)
        assert renderer.text_color == (255, 255, 255)
        snapshot = replace(make_snapshot(), snake_color="green", food_color="#f00")
        img = renderer.render_frame(snapshot)
        assert img.getpixel((8, 8)) == (0, 0, 128)
        assert img.getpixel((2 * 16 + 8, 2 * 16 + 8)) == (0, 128, 0)
        assert img.getpixel((7 * 16 + 8, 2 * 16 + 8)) == (255, 0, 0)

    def test_out_of_bounds_tile_does_not_fail(self):
        img = FrameRenderer().render_frame(make_snapshot(snake=((-1, 5), (0, 5))))
        assert img.getpixel((8, 5 * 16 + 8)) == color_to_rgb("#4F7022")

    def test_status_text_is_drawn(self):
        plain = FrameRenderer().render_frame(make_snapshot(snake=((0, 0),), food=(9, 0)))
        with_text = FrameRenderer().render_frame(
            make_snapshot(snake=((0, 0),), food=(9, 0), status="Game over! Score: 2")
        )
        assert plain.tobytes() != with_text.tobytes()

    def test_render_stores_last_image(self):
        renderer = FrameRenderer()
        assert renderer.last_image is None
        renderer.render(make_snapshot())
        assert isinstance(renderer.last_image, Image.Image)


class TestSnakeVideoGenerator:
    def test_rejects_bad_fps(self):
        with pytest.raises(ValueError):
            SnakeVideoGenerator(fps=0)

    def test_rejects_empty_sequence(self, tmp_path):
        with pytest.raises(ValueError):
            SnakeVideoGenerator().generate_video([], str(tmp_path / "out.gif"))

    def test_writes_gif(self, tmp_path):
        snapshots = [
            make_snapshot(snake=((2, 2),)),
            make_snapshot(snake=((3, 2),)),
            make_snapshot(snake=((4, 2),)),
        ]
        output = str(tmp_path / "nested" / "out.gif")
        path = SnakeVideoGenerator(fps=20).generate_video(snapshots, output)

        assert path == output
        with Image.open(path) as gif:
            assert gif.n_frames == 3
            assert gif.info["duration"] == 50

    def test_mp4_goes_through_moviepy(self, tmp_path, monkeypatch):
        generator = SnakeVideoGenerator()
        written = {}
        monkeypatch.setattr(generator, "_write_mp4", lambda frames, path: written.update(path=path, n=len(frames)))
        generator.generate_video([make_snapshot()], str(tmp_path / "out.mp4"))
        assert written == {"path": str(tmp_path / "out.mp4"), "n": 1}


def test_get_video_local_path():
    assert get_video_local_path("abc", extension="gif", directory="out") == os.path.join("out", "abc_replay.gif")
