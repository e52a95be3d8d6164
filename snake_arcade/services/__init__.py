"""
Services around the game controller: ticking, rendering and recording.
"""
