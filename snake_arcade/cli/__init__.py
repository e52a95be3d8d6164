"""
Command-line entry points for Snake Arcade.
"""
