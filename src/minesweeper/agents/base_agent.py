"""
Base agent interface for Minesweeper players.

Defines what the evaluator and the demo need from an automated player.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..cell import OBS_FLAGGED, OBS_HIDDEN


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents see the same observation a player sees and answer with a flat
    cell index to reveal.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the next cell to reveal.

        Args:
            observation: 2D array of cell codes.
            valid_actions: Optional mask of cells that can still be revealed.

        Returns:
            Action index (row * width + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.board_width, action % self.board_width

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Mask of cells that are not yet revealed (hidden or flagged)."""
        flat_obs = observation.flatten()
        return (flat_obs == OBS_HIDDEN) | (flat_obs == OBS_FLAGGED)

    def reset(self) -> None:
        """Reset agent state for a new round."""
