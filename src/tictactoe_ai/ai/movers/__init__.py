from .random_mover import RandomMover
from .heuristic_mover import HeuristicMover, HeuristicChoice, HeuristicRule

__all__ = ['RandomMover', 'HeuristicMover', 'HeuristicChoice', 'HeuristicRule']
