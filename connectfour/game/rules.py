"""
rules.py - Game engine and Gymnasium environment for Connect Four

This module provides:
1. GameEngine, which owns the board, the turn order and the win/tie checks
2. ConnectFourEnv, a gymnasium-compatible wrapper that drives an engine
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import (DEFAULT_WIDTH, DEFAULT_HEIGHT, Cell, Coord,
                               DropOutcome, GameStatus)


@dataclass
class GameState:
    """Mutable state of one game. Only GameEngine writes to it."""
    board: Board
    players: Tuple[Any, Any]
    current: Cell = Cell.FIRST
    active: bool = True
    winner_seat: Optional[Cell] = None
    moves_made: int = 0

    @property
    def current_player(self) -> Any:
        return self.player_for(self.current)

    def player_for(self, seat: Cell) -> Any:
        return self.players[seat.value - 1]


@dataclass(frozen=True)
class DropResult:
    """What happened on a call to GameEngine.drop_piece."""
    outcome: DropOutcome
    placed_at: Optional[Coord] = None
    winner: Any = None

    @property
    def ignored(self) -> bool:
        return self.outcome == DropOutcome.IGNORED


IGNORED = DropResult(DropOutcome.IGNORED)


class GameEngine:
    """
    Connect Four game engine.

    Two players alternate dropping pieces into columns until one of them
    lines up four (horizontally, vertically or diagonally) or the board
    fills up. The engine does no I/O; callers forward column choices to
    drop_piece and draw from the returned DropResult and the query methods.
    """

    def __init__(self):
        self._state: Optional[GameState] = None
        self._winning_line: List[Coord] = []

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    @property
    def board(self) -> Optional[Board]:
        return self._state.board if self._state else None

    def start_game(self, player1: Any, player2: Any,
                   width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> GameState:
        """
        Start a fresh game, discarding any game in progress.

        Args:
            player1: Identifier of the player who moves first
            player2: Identifier of the other player
            width: Number of columns
            height: Number of rows

        Returns:
            The new game state

        Raises:
            InvalidConfigurationError: If width or height is not a positive
                integer. The previous game, if any, is left untouched.
        """
        board = Board(width, height)
        if player1 == player2:
            debug.warning(f"Both players use the identifier {player1!r}", "engine")

        self._state = GameState(board=board, players=(player1, player2))
        self._winning_line = []
        debug.info(f"New {board.width}x{board.height} game: {player1!r} vs {player2!r}", "engine")
        return self._state

    def drop_piece(self, column: int) -> DropResult:
        """
        Drop the current player's piece into a column.

        Input that cannot be played (no game running, column off the board,
        column full) is ignored without touching the state.

        Args:
            column: Column index (0-indexed)

        Returns:
            DropResult with outcome IGNORED, CONTINUE, WIN or TIE
        """
        state = self._state
        if state is None or not state.active:
            debug.debug(f"Ignoring drop in column {column}: no active game", "engine")
            return IGNORED

        board = state.board
        row = board.place(column, state.current)
        if row is None:
            debug.debug(f"Ignoring drop in column {column}: not playable", "engine")
            return IGNORED

        state.moves_made += 1
        placed_at = (row, int(column))
        mover = state.current_player

        debug.start_timer("win_check")
        winning_line = board.winning_line(state.current)
        debug.end_timer("win_check", "engine")

        if winning_line is not None:
            state.active = False
            state.winner_seat = state.current
            self._winning_line = winning_line
            debug.info(f"Player {mover!r} wins with {winning_line}", "engine")
            return DropResult(DropOutcome.WIN, placed_at, mover)

        if board.is_full():
            state.active = False
            debug.info("Game ends in a tie", "engine")
            return DropResult(DropOutcome.TIE, placed_at)

        state.current = state.current.other()
        debug.debug(f"{mover!r} played {placed_at}; {state.current_player!r} to move", "engine")
        return DropResult(DropOutcome.CONTINUE, placed_at)

    def is_active(self) -> bool:
        return self._state is not None and self._state.active

    def status(self) -> GameStatus:
        state = self._state
        if state is None:
            return GameStatus.NOT_STARTED
        if state.active:
            return GameStatus.IN_PROGRESS
        return GameStatus.WIN if state.winner_seat is not None else GameStatus.TIE

    def winner(self) -> Any:
        """The winning player's identifier, or None if nobody has won."""
        state = self._state
        if state is None or state.winner_seat is None:
            return None
        return state.player_for(state.winner_seat)

    def is_tie(self) -> bool:
        return self.status() == GameStatus.TIE

    def current_player(self) -> Any:
        """Identifier of the player to move (or who made the final move)."""
        return self._state.current_player if self._state else None

    def valid_moves(self) -> List[int]:
        if not self.is_active():
            return []
        return self._state.board.valid_columns()

    def winning_line(self) -> List[Coord]:
        """Coordinates of the winning four, empty unless the game was won."""
        return list(self._winning_line)

    def render(self) -> str:
        return self._state.board.render() if self._state else ""


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Each step drops a piece for whichever player is to move. Rewards are
    given from the first player's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 players: Tuple[Any, Any] = ("X", "O"),
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            width: Number of columns
            height: Number of rows
            players: Identifiers for the first and second player
            render_mode: None, "ascii" or "human"
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.engine = GameEngine()
        self.players = players
        # Validates the dimensions before any space is built
        self.engine.start_game(players[0], players[1], width, height)
        self.width, self.height = self.engine.board.width, self.engine.board.height

        self.action_space = spaces.Discrete(self.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.height, self.width), dtype=np.int8
        )
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.0
        self.reward_ignored = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.engine.start_game(self.players[0], self.players[1], self.width, self.height)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        Args:
            action: Column to drop into (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.engine.drop_piece(int(action))

        if result.ignored:
            debug.debug(f"Ignored action: {action}", "env")
            info = self._get_info()
            info['ignored'] = True
            return self._get_observation(), self.reward_ignored, False, True, info

        reward = self.reward_step
        terminated = False
        if result.outcome == DropOutcome.WIN:
            seat = self.engine.state.winner_seat
            reward = self.reward_win if seat == Cell.FIRST else self.reward_lose
            terminated = True
        elif result.outcome == DropOutcome.TIE:
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        info = self._get_info()
        info['placed_at'] = result.placed_at
        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode == "ascii":
            return self.engine.render()
        elif self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.board.get_state()

    def _get_info(self) -> Dict:
        valid_moves = self.engine.valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_player(),
            'status': self.engine.status().name,
            'moves_made': self.engine.state.moves_made,
            'winning_line': self.engine.winning_line(),
            'ignored': False,
        }

    def close(self):
        pass
