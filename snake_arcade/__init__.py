"""
Snake Arcade - a single-player grid snake game.

The simulation lives in snake_arcade.domain and snake_arcade.game; rendering,
input sources and command-line tools sit around it.
"""

__version__ = "0.1.0"
