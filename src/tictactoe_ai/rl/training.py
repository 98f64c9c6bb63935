"""
Train a MaskablePPO agent against the built-in opponent.

Requires the ``train`` extra (stable-baselines3, sb3-contrib, torch).
"""
import os
import sys
import argparse
import logging
from typing import List, Optional

import numpy as np
import torch as th
from sb3_contrib import MaskablePPO
from sb3_contrib.common.wrappers import ActionMasker

from ..models.enums import Difficulty, Symbol
from .environment import TicTacToeEnv
from .evaluation import Policy, evaluate

logger = logging.getLogger('tictactoe_ai.training')

MODEL_PREFIX = "ppo_tictactoe_maskable"


def masking(env: TicTacToeEnv) -> np.ndarray:
    return env.action_masks()


def make_env(opponent_difficulty=Difficulty.EASY, agent_symbol=Symbol.X) -> ActionMasker:
    return ActionMasker(TicTacToeEnv(opponent_difficulty=opponent_difficulty, agent_symbol=agent_symbol), masking)


def train(opponent_difficulty=Difficulty.EASY, agent_symbol=Symbol.X, total_timesteps: int = 200000,
          save_every: int = 20000, model_dir: str = "models", learning_rate: float = 0.001,
          resume_from: Optional[str] = None, seed: Optional[int] = None,
          n_steps: int = 2048, batch_size: int = 64, verbose: int = 0) -> str:
    """
    Train (or keep training) an agent and checkpoint it periodically.

    Args:
        opponent_difficulty: Tier of the built-in opponent
        agent_symbol: Mark the agent plays
        total_timesteps: Stop once this many steps have been learned
        save_every: Steps between checkpoints
        model_dir: Directory for checkpoints
        learning_rate: Optimizer learning rate for a fresh model
        resume_from: Path of a saved model to continue from
        seed: Seed for a fresh model
        n_steps: Rollout length per update for a fresh model
        batch_size: Minibatch size for a fresh model
        verbose: stable-baselines3 verbosity

    Returns:
        Path of the last checkpoint written
    """
    if save_every <= 0:
        raise ValueError("save_every must be positive")

    env = make_env(opponent_difficulty, agent_symbol)
    if resume_from:
        model = MaskablePPO.load(resume_from, env=env, verbose=verbose)
    else:
        model = MaskablePPO(
            "MlpPolicy", env, verbose=verbose, learning_rate=learning_rate, seed=seed,
            n_steps=n_steps, batch_size=batch_size,
            policy_kwargs=dict(activation_fn=th.nn.ReLU, net_arch=[64, 64]),
        )

    os.makedirs(model_dir, exist_ok=True)
    difficulty = Difficulty.parse(opponent_difficulty).value
    last_path = None
    iteration = 0
    while iteration < total_timesteps:
        try:
            chunk = min(save_every, total_timesteps - iteration)
            model.learn(total_timesteps=chunk, reset_num_timesteps=False)
            iteration += chunk
            last_path = os.path.join(model_dir, f"{MODEL_PREFIX}_{difficulty}_{iteration}")
            model.save(last_path)
            logger.info(f"Saved checkpoint {last_path}")
        except KeyboardInterrupt:
            logger.warning(f"Training interrupted after {iteration} steps")
            break

    return last_path


def load_policy(path: str, deterministic: bool = True) -> Policy:
    """Wrap a saved model as a policy usable with ``evaluate``."""
    model = MaskablePPO.load(path)

    def act(obs: np.ndarray, mask: np.ndarray) -> int:
        action, _ = model.predict(obs, action_masks=mask, deterministic=deterministic)
        return int(action)

    return act


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog='tictactoe-train',
                                description="Train a MaskablePPO agent against the computer opponent")
    p.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=Difficulty.EASY.value)
    p.add_argument("--agent-symbol", choices=["X", "O"], default="X")
    p.add_argument("--timesteps", type=int, default=200000)
    p.add_argument("--save-every", type=int, default=20000)
    p.add_argument("--model-dir", default="models")
    p.add_argument("--learning-rate", type=float, default=0.001)
    p.add_argument("--resume-from", default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--evaluate", type=int, default=100, metavar="GAMES",
                   help="games to play with the final model (0 to skip)")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    path = train(
        opponent_difficulty=args.difficulty,
        agent_symbol=args.agent_symbol,
        total_timesteps=args.timesteps,
        save_every=args.save_every,
        model_dir=args.model_dir,
        learning_rate=args.learning_rate,
        resume_from=args.resume_from,
        seed=args.seed,
        verbose=1 if args.verbose else 0,
    )
    if path is None:
        print("No checkpoint was written", file=sys.stderr)
        return 1

    print(f"Model saved to {path}")
    if args.evaluate > 0:
        report = evaluate(load_policy(path), num_games=args.evaluate,
                          opponent_difficulty=args.difficulty, agent_symbol=args.agent_symbol,
                          seed=args.seed)
        print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
