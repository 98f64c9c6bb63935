from .minimax import MinimaxSolver, SearchResult

__all__ = ['MinimaxSolver', 'SearchResult']
