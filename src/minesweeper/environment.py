"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game session through the standard reset/step interface so that
agents can play rounds programmatically.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from .engine import GameState, Outcome, restart
from .shell import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._rng = random.Random()
        self.state = self._new_state()

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def _new_state(self) -> GameState:
        return restart(
            self.config.width, self.config.height, self.config.num_mines, self._rng
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new round on a fresh board.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.state = self._new_state()
        self._steps = 0

        return self.state.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.state.board.get_observation()
        terminated = self.state.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = int(action) // self.config.width
        col = int(action) % self.config.width
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Reveal a cell and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        cell = self.state.board.get_cell(row, col)
        if cell is None or cell.is_revealed or self.state.is_over:
            return -0.1

        outcome = self.state.reveal(row, col)
        if outcome == Outcome.WON:
            return 10.0
        if outcome == Outcome.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.state.board
        return {
            "steps": self._steps,
            "revealed": board.count_revealed(),
            "total_safe": self.config.safe_cells,
            "game_state": self.state.outcome.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.state.board, reveal_all=self.state.is_over)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        obs = self.state.board.get_observation().flatten()
        return (obs == OBS_HIDDEN) | (obs == OBS_FLAGGED)
