from .win_detector import WinDetector, line_complete

__all__ = ['WinDetector', 'line_complete']
