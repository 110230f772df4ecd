"""
Automated players for Minesweeper.

Agents pick which cell to reveal from a board observation:
- RandomAgent: baseline uniform choice among unrevealed cells
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
