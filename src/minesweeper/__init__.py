"""
Minesweeper game module.

Provides the board model, the reveal engine and thin front-ends
(console shell and Gymnasium environment).
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, InvalidConfiguration
from .engine import GameState, Outcome, flag, new_session, restart, reveal
from .environment import MinesweeperEnv
from .shell import ConsoleShell, render_board

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "InvalidConfiguration",
    "GameState",
    "Outcome",
    "new_session",
    "restart",
    "reveal",
    "flag",
    "MinesweeperEnv",
    "ConsoleShell",
    "render_board",
]
