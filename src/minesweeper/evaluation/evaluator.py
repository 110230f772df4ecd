"""
Agent evaluation for Minesweeper.

Runs an agent for a fixed number of rounds on fresh boards and reports
win rate, reward and progress statistics.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..agents.base_agent import BaseAgent
from ..board import BoardConfig
from ..environment import MinesweeperEnv


logger = logging.getLogger(__name__)


# ============================================================================
# Evaluation Statistics
# ============================================================================

@dataclass
class EvaluationResult:
    """Accumulated statistics over evaluated rounds."""

    rounds: int = 0
    wins: int = 0
    losses: int = 0
    unfinished: int = 0
    total_reward: float = 0.0
    total_steps: int = 0
    revealed_history: List[int] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        """Fraction of rounds won."""
        if self.rounds == 0:
            return 0.0
        return self.wins / self.rounds

    @property
    def avg_reward(self) -> float:
        if self.rounds == 0:
            return 0.0
        return self.total_reward / self.rounds

    @property
    def avg_steps(self) -> float:
        if self.rounds == 0:
            return 0.0
        return self.total_steps / self.rounds

    @property
    def avg_revealed(self) -> float:
        if not self.revealed_history:
            return 0.0
        return sum(self.revealed_history) / len(self.revealed_history)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for reporting."""
        return {
            "rounds": self.rounds,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": self.win_rate,
            "avg_reward": self.avg_reward,
            "avg_steps": self.avg_steps,
            "avg_revealed": self.avg_revealed,
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Every agent plays the same number of rounds on the same board
    configuration; with a seed, every agent also sees the same boards.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of rounds per agent.
            max_steps: Maximum moves per round (default: one per cell).
            seed: Base seed for board generation.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.board_config.total_cells
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> EvaluationResult:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Statistics over all rounds.
        """
        env = MinesweeperEnv(config=self.board_config)
        result = EvaluationResult()

        for episode in range(self.num_episodes):
            seed = None if self.seed is None else self.seed + episode
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, truncated, info = env.step(action)
                result.total_reward += reward
                result.total_steps += 1
                if terminated or truncated:
                    break

            result.rounds += 1
            result.revealed_history.append(info["revealed"])
            if info["game_state"] == "WON":
                result.wins += 1
            elif info["game_state"] == "LOST":
                result.losses += 1
            else:
                result.unfinished += 1

        logger.debug(
            "Evaluated %d round(s): %d won, %d lost",
            result.rounds, result.wins, result.losses,
        )
        return result

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, EvaluationResult]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation statistics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results
