"""
connectfour - Connect Four game engine

This package provides the board model, turn sequencing and four-in-a-row
detection for a two-player Connect Four game, plus a terminal front end and
a gymnasium environment that drive the engine.
"""

__version__ = '0.1.0'
