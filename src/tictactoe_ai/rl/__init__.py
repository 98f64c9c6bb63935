# Gymnasium environment around the computer opponent.
# Training lives in rl.training and needs the optional "train" extra.
from .environment import TicTacToeEnv
from .evaluation import EvaluationReport, evaluate, random_policy

__all__ = ['TicTacToeEnv', 'EvaluationReport', 'evaluate', 'random_policy']
