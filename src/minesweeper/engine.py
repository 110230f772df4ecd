"""
Reveal engine for Minesweeper.

Holds the game session (a board plus the round outcome) and applies
reveal semantics: flood-fill expansion of zero-count regions, loss on a
mine, and the win check after every reveal.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from .board import Board, BoardConfig, Position


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Outcome(Enum):
    """Possible outcomes of a round."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameState:
    """
    One game session: the current board and the round outcome.

    Only ``reveal`` changes the outcome. Once it is WON or LOST, reveals
    and flags are ignored until a new session replaces this one.
    """

    board: Board
    outcome: Outcome = Outcome.PLAYING

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> Outcome:
        """
        Reveal the cell at (row, col) and cascade through empty regions.

        Out-of-bounds targets, already revealed cells and any call after
        the round ended are silent no-ops.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The outcome after the reveal.
        """
        if self.outcome != Outcome.PLAYING:
            return self.outcome
        cell = self.board.get_cell(row, col)
        if cell is None or cell.is_revealed:
            return self.outcome

        revealed = self._flood_reveal(row, col)
        if self.outcome == Outcome.LOST:
            logger.info("Round lost: mine at (%d, %d)", row, col)
            return self.outcome

        logger.debug("Revealed %d cell(s) from (%d, %d)", revealed, row, col)
        if self.board.all_safe_revealed():
            self.outcome = Outcome.WON
            logger.info("Round won")
        return self.outcome

    def _flood_reveal(self, row: int, col: int) -> int:
        """
        Reveal from (row, col), expanding through zero-count cells.

        The REVEALED state doubles as the visited marker, so every cell
        is pushed and opened at most once.

        Returns:
            Number of cells revealed.
        """
        revealed = 0
        stack: List[Position] = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self.board.get_cell(current_row, current_col)
            if cell is None or not cell.reveal():
                continue
            revealed += 1

            if cell.is_mine:
                self.outcome = Outcome.LOST
                return revealed

            if cell.adjacent_mines == 0:
                for neighbor in self.board.neighbors(current_row, current_col):
                    if not self.board.get_cell(*neighbor).is_revealed:
                        stack.append(neighbor)
        return revealed

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Flags are markers only: they never change the outcome.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self.outcome != Outcome.PLAYING:
            return False
        cell = self.board.get_cell(row, col)
        if cell is None:
            return False
        return cell.toggle_flag()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.outcome == Outcome.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.outcome == Outcome.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.outcome == Outcome.LOST

    @property
    def is_over(self) -> bool:
        """Check if the round reached a terminal outcome."""
        return self.outcome != Outcome.PLAYING


# ============================================================================
# Session Entry Points
# ============================================================================

def new_session(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Create a ready-to-play session.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_count: Number of mines to place.
        rng: Random source for mine placement.

    Returns:
        Session with mines placed, counts computed and outcome PLAYING.

    Raises:
        InvalidConfiguration: If the dimensions or mine count are invalid.
    """
    config = BoardConfig(width=width, height=height, num_mines=mine_count)
    board = Board.create(config, rng)
    logger.debug(
        "New session: %dx%d with %d mine(s)", width, height, mine_count
    )
    return GameState(board=board)


def restart(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Start over with a brand new board; the old session is discarded."""
    return new_session(width, height, mine_count, rng)


def reveal(state: GameState, row: int, col: int) -> Outcome:
    """Reveal (row, col) in ``state``. See ``GameState.reveal``."""
    return state.reveal(row, col)


def flag(state: GameState, row: int, col: int) -> bool:
    """Toggle the flag at (row, col) in ``state``. See ``GameState.flag``."""
    return state.flag(row, col)
