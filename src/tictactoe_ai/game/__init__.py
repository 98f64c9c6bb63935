# Board model; the session lives in game.session since it depends on the engine
from .board import Board, ValidationResult, render_index_map

__all__ = ['Board', 'ValidationResult', 'render_index_map']
