"""
Random agent for Minesweeper.

Serves as a baseline by revealing unrevealed cells at random.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that picks uniformly among cells not yet revealed.

    Gives a floor for win rates: on a 10x10 board with 10 mines it wins
    only a small fraction of rounds.
    """

    def __init__(
        self,
        board_height: int = 10,
        board_width: int = 10,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random unrevealed cell.

        Args:
            observation: 2D array of cell codes.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions, or 0 when none remain.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0
        return int(self.rng.choice(valid_indices))
