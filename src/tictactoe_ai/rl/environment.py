from typing import Optional
import random
import numpy as np
import gymnasium as gym

from ..ai.engine import MoveSelector
from ..ai.evaluation.win_detector import WinDetector
from ..game.board import Board
from ..models.enums import Difficulty, Symbol


CELLS = Board.TOTAL_CELLS


class TicTacToeEnv(gym.Env):
    """
    Single-agent tic-tac-toe against the built-in computer opponent.

    The agent's cells are 1 in the observation, the opponent's -1. The
    opponent replies inside ``step`` and, when the agent plays O, opens inside
    ``reset``.
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, opponent_difficulty=Difficulty.EASY, agent_symbol=Symbol.X,
                 render_mode: Optional[str] = None):
        super().__init__()
        self.opponent_difficulty = Difficulty.parse(opponent_difficulty)
        self.agent_symbol = Symbol(agent_symbol)
        self.opponent_symbol = self.agent_symbol.opponent()
        self.render_mode = render_mode

        self.action_space = gym.spaces.Discrete(CELLS)
        self.observation_space = gym.spaces.Box(low=-1, high=1, shape=(CELLS,), dtype=np.int8)
        self.reward_win = 100
        self.reward_draw = 0
        self.reward_lose = -100
        self.threat_penalty = 5

        self.board = Board()
        self.win_detector = WinDetector()
        self.selector = MoveSelector()

    def action_mask(self) -> list[np.int8]:
        return [np.int8(cell is None) for cell in self.board.cells]

    def action_masks(self) -> np.ndarray:
        """Boolean mask in the form sb3-contrib's MaskablePPO expects."""
        return np.array([cell is None for cell in self.board.cells], dtype=bool)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed, options=options)
        self.board.reset()
        # Derive the opponent's random source from the env seed so episodes replay
        self.selector = MoveSelector(rng=random.Random(int(self.np_random.integers(2 ** 31))))

        if self.agent_symbol is Symbol.O:
            self._opponent_move()

        return self._get_obs(), self._get_info()

    def _get_obs(self):
        obs = np.zeros(CELLS, dtype=np.int8)
        for i, cell in enumerate(self.board.cells):
            if cell is self.agent_symbol:
                obs[i] = 1
            elif cell is self.opponent_symbol:
                obs[i] = -1
        return obs

    def _get_info(self):
        return {"action_mask": self.action_mask()}

    def _is_valid_action(self, action):
        return 0 <= action < CELLS and self.board.is_empty(int(action))

    def _opponent_move(self):
        move = self.selector.select_move(
            self.board, self.opponent_difficulty, self.opponent_symbol, self.agent_symbol
        )
        self.board.place(move, self.opponent_symbol)

    def calculate_intermediate_reward(self):
        """
        Reward for a move that did not end the game.

        A small time penalty grows with the number of marks on the board, and
        leaving the opponent an open two-in-a-row costs more.
        """
        n_moves = CELLS - len(self.board.get_empty_cells())
        time_penalty = n_moves / CELLS
        if self.win_detector.find_completing_cell(self.board, self.opponent_symbol) is not None:
            return -self.threat_penalty - time_penalty
        return -time_penalty

    def step(self, action):
        if not self._is_valid_action(action):
            raise ValueError(f"Invalid action: {action}")

        self.board.place(int(action), self.agent_symbol)

        res = None
        if self.win_detector.has_win(self.board, self.agent_symbol):
            res = self._get_obs(), self.reward_win, True, False, self._get_info()
        elif self.win_detector.is_draw(self.board):
            res = self._get_obs(), self.reward_draw, True, False, self._get_info()
        else:
            self._opponent_move()
            if self.win_detector.has_win(self.board, self.opponent_symbol):
                res = self._get_obs(), self.reward_lose, True, False, self._get_info()
            elif self.win_detector.is_draw(self.board):
                res = self._get_obs(), self.reward_draw, True, False, self._get_info()
            else:
                res = self._get_obs(), self.calculate_intermediate_reward(), False, False, self._get_info()

        if self.render_mode == "human":
            self.render()
        return res

    def render(self):
        text = str(self.board)
        if self.render_mode == "ansi":
            return text
        print(text)
        print()
