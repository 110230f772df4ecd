"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src (package) and the repo root (main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameState, new_session


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 10 mines, placed with a seed."""
    return Board.create(BoardConfig(), random.Random(1234))


@pytest.fixture
def blank_board() -> Board:
    """Create a 4x3 board before mine placement."""
    return Board(BoardConfig(width=4, height=3, num_mines=2))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with one mine in the middle; every other count is 1."""
    return Board.from_mine_positions(BoardConfig(3, 3, 1), [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with one mine in the bottom-right corner."""
    return Board.from_mine_positions(BoardConfig(3, 3, 1), [(2, 2)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a wall of mines down column 2.

    Columns 0-1 and 3-4 are separate safe regions.
    """
    mines = [(row, 2) for row in range(5)]
    return Board.from_mine_positions(BoardConfig(5, 5, 5), mines)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_session() -> GameState:
    """Create a seeded 10x10 session with 10 mines."""
    return new_session(10, 10, 10, random.Random(42))


@pytest.fixture
def center_mine_session(center_mine_board: Board) -> GameState:
    return GameState(board=center_mine_board)


@pytest.fixture
def corner_mine_session(corner_mine_board: Board) -> GameState:
    return GameState(board=corner_mine_board)


@pytest.fixture
def walled_session(walled_board: Board) -> GameState:
    return GameState(board=walled_board)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small configuration for fast environment tests."""
    return BoardConfig(4, 4, 2)
