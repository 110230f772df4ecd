"""
Evaluation module for Minesweeper agents.

Plays many rounds through the environment and summarises outcomes.
"""
from .evaluator import EvaluationResult, Evaluator

__all__ = [
    "EvaluationResult",
    "Evaluator",
]
