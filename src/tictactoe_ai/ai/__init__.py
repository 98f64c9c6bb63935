# Computer opponent: detection, movers, search and the selector tying them together
from .engine import MoveSelector, MoveDecision, DecisionMetrics

__all__ = ['MoveSelector', 'MoveDecision', 'DecisionMetrics']
