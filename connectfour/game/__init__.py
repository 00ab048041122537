"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the game engine and the
gymnasium environment built on top of it.
"""

from connectfour.game.board import Board
from connectfour.game.rules import ConnectFourEnv, DropResult, GameEngine, GameState

__all__ = ['Board', 'ConnectFourEnv', 'DropResult', 'GameEngine', 'GameState']
