"""
Board module for Minesweeper.

Implements the grid of cells, random mine placement and the one-off
adjacency count pass. Gameplay (revealing, win/lose) lives in
``engine.py`` and only mutates cell state through this board.
"""
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

class InvalidConfiguration(ValueError):
    """Raised when board dimensions or mine count cannot form a game."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 10
    height: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. A board is playable once ``place_mines`` and
    ``compute_adjacency_counts`` have both run, which ``Board.create``
    does in one step.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines_placed: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    @classmethod
    def create(
        cls,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a ready-to-play board with randomly placed mines.

        Args:
            config: Board dimensions and mine count.
            rng: Random source for mine placement.

        Returns:
            Board with mines placed and adjacency counts computed.
        """
        board = cls(config)
        board.place_mines(rng)
        board.compute_adjacency_counts()
        return board

    @classmethod
    def from_mine_positions(
        cls,
        config: BoardConfig,
        positions: Iterable[Position],
    ) -> "Board":
        """
        Build a ready-to-play board with mines at known positions.

        Args:
            config: Board dimensions and mine count.
            positions: (row, col) of every mine.

        Returns:
            Board with mines placed and adjacency counts computed.

        Raises:
            InvalidConfiguration: If positions repeat, fall outside the
                board, or do not match ``config.num_mines``.
        """
        board = cls(config)
        mines = list(positions)
        if len(set(mines)) != len(mines):
            raise InvalidConfiguration("Mine positions must be distinct")
        if len(mines) != config.num_mines:
            raise InvalidConfiguration(
                f"Expected {config.num_mines} mine positions, got {len(mines)}"
            )
        for row, col in mines:
            if not board.in_bounds(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is outside the board"
                )
        board._set_mines(mines)
        board.compute_adjacency_counts()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._mines_placed = False

    def place_mines(self, rng: Optional[random.Random] = None) -> None:
        """
        Place ``config.num_mines`` mines uniformly at random.

        Positions are sampled without replacement, so every mine lands on
        a distinct cell.

        Args:
            rng: Random source; the module-level generator when omitted.

        Raises:
            RuntimeError: If mines were already placed on this board.
        """
        rng = rng or random
        positions = [
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
        ]
        self._set_mines(rng.sample(positions, self.config.num_mines))

    def _set_mines(self, positions: Iterable[Position]) -> None:
        """Mark the given positions as mines."""
        if self._mines_placed:
            raise RuntimeError("Mines have already been placed on this board")
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._mines_placed = True

    def compute_adjacency_counts(self) -> None:
        """
        Calculate adjacent mine counts for all non-mine cells.

        Raises:
            RuntimeError: If mines have not been placed yet.
        """
        if not self._mines_placed:
            raise RuntimeError("Place mines before computing adjacency counts")
        for row, col, cell in self.iter_cells():
            if not cell.is_mine:
                cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Cells on an edge simply have fewer neighbors; the grid does not
        wrap around.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Read-only Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, col, cell) for every cell in row-major order."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                yield row, col, self._grid[row][col]

    def mine_positions(self) -> List[Position]:
        """Positions of every mine on the board."""
        return [(row, col) for row, col, cell in self.iter_cells() if cell.is_mine]

    def count_revealed(self) -> int:
        """Number of revealed cells."""
        return sum(1 for _, _, cell in self.iter_cells() if cell.is_revealed)

    def all_safe_revealed(self) -> bool:
        """Check whether every non-mine cell has been revealed."""
        return all(
            cell.is_revealed
            for _, _, cell in self.iter_cells()
            if not cell.is_mine
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row, col, cell in self.iter_cells():
            obs[row, col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that a reveal would still change.

        Returns:
            List of (row, col) positions that are hidden or flagged.
        """
        return [
            (row, col)
            for row, col, cell in self.iter_cells()
            if cell.state != CellState.REVEALED
        ]
