# Data models and enums
from .enums import Symbol, Difficulty, GameState, GameMode, LineType
from .move import Move
from .win_line import WinLine, WinResult, WIN_LINES

__all__ = ['Symbol', 'Difficulty', 'GameState', 'GameMode', 'LineType',
           'Move', 'WinLine', 'WinResult', 'WIN_LINES']
