"""
Play full games in the environment and tally the results.
"""
from dataclasses import dataclass
from typing import Callable, Optional
import numpy as np

from ..models.enums import Difficulty, Symbol
from .environment import TicTacToeEnv


# (observation, action mask) -> action
Policy = Callable[[np.ndarray, np.ndarray], int]


@dataclass
class EvaluationReport:
    win: int = 0
    lose: int = 0
    draw: int = 0

    @property
    def games(self) -> int:
        return self.win + self.lose + self.draw

    def __str__(self) -> str:
        return f"win: {self.win}\nlose: {self.lose}\ndraw: {self.draw}"


def random_policy(rng: Optional[np.random.Generator] = None) -> Policy:
    """A policy that plays a uniformly random legal cell."""
    rng = rng if rng is not None else np.random.default_rng()

    def act(obs: np.ndarray, mask: np.ndarray) -> int:
        return int(rng.choice(np.flatnonzero(mask)))

    return act


def evaluate(policy: Policy, num_games: int = 100, opponent_difficulty=Difficulty.EASY,
             agent_symbol=Symbol.X, seed: Optional[int] = None, debug: bool = False) -> EvaluationReport:
    """
    Play ``num_games`` complete games with ``policy`` as the agent.

    Args:
        policy: Callable mapping (observation, boolean action mask) to a cell
        num_games: Number of games to play
        opponent_difficulty: Tier of the built-in opponent
        agent_symbol: Mark the agent plays
        seed: Seed for the first reset; later resets continue the same stream
        debug: Render every position

    Returns:
        EvaluationReport with the win/lose/draw tally from the agent's side
    """
    env = TicTacToeEnv(opponent_difficulty=opponent_difficulty, agent_symbol=agent_symbol,
                       render_mode="human" if debug else None)
    report = EvaluationReport()

    obs, _ = env.reset(seed=seed)
    for _ in range(num_games):
        done = False
        reward = 0
        while not done:
            action = policy(obs, env.action_masks())
            obs, reward, done, truncated, _ = env.step(action)
            done = done or truncated

        if reward == env.reward_win:
            report.win += 1
        elif reward == env.reward_lose:
            report.lose += 1
        else:
            report.draw += 1
        obs, _ = env.reset()

    env.close()
    return report
