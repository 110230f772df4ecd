"""
Cell module for Minesweeper.

A cell is one grid position: whether it hides a mine, how many mines
surround it, and whether the player has opened or flagged it.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """What the player currently sees at a position."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation codes shared by the environment and the agents
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One position on the grid.

    ``is_mine`` is fixed by mine placement and ``adjacent_mines`` by the
    board's single counting pass; only ``state`` changes during play.
    Revealing is one-way. Flagging toggles between hidden and flagged and
    is purely a marker.

    Attributes:
        is_mine: Whether a mine is buried here.
        adjacent_mines: Mines among the up-to-8 neighbors (0-8).
            Only meaningful when ``is_mine`` is False.
        state: Hidden, revealed or flagged.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Open this cell, whether it is hidden or flagged.

        Returns:
            True if the cell was opened now, False if it was already open.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Switch between hidden and flagged.

        Returns:
            False for an opened cell, which cannot carry a flag.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Integer code for this cell as the player sees it.

        A hidden mine reads as hidden; the mine code only appears once
        the cell is opened.

        Returns:
            OBS_HIDDEN (-1), OBS_FLAGGED (-2), the adjacent count (0-8)
            for an opened safe cell, or OBS_MINE (9) for an opened mine.
        """
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
