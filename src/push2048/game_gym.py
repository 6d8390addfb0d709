import gymnasium as gym
from gymnasium import spaces
import numpy as np

from push2048.game import DEFAULT_SIZE, Game2048, format_board
from push2048.lines import DIRECTION_NAMES


class NumpyRandomSource:
    """lets the engine draw from a numpy Generator (gymnasium's np_random)"""

    def __init__(self, generator):
        self.generator = generator

    def randrange(self, start, stop):
        return int(self.generator.integers(start, stop))


class Game2048Env(gym.Env):
    """
    gymnasium environment for 2048 with eight push directions

    - one discrete action per direction, in DIRECTION_NAMES order
    - observation is the raw board (not log2)
    - there is no score: a move that changes the board is worth 1.0,
      a move that does nothing is worth 0.0
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, size=DEFAULT_SIZE, render_mode=None):
        super().__init__()

        self.size = size
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(len(DIRECTION_NAMES))
        self.observation_space = spaces.Box(
            low=0,
            high=131072,
            shape=(size, size),
            dtype=np.int32
        )

        # map actions to game directions
        self.action_to_direction = dict(enumerate(DIRECTION_NAMES))

        self.game = None

    def _get_observation(self):
        return np.array(self.game.board, dtype=np.int32)

    def action_mask(self):
        """1 for every action that would change the board, 0 otherwise"""
        return np.array(
            [int(not self.game.game_over and self.game.can_move(name)) for name in DIRECTION_NAMES],
            dtype=np.int8
        )

    def _get_info(self, changed=False):
        return {
            "changed": changed,
            "max_tile": self.game.max_tile(),
            "action_mask": self.action_mask(),
        }

    def reset(self, seed=None, options=None):
        """reset the game to start a new episode"""
        super().reset(seed=seed)

        rng = NumpyRandomSource(self.np_random)
        if self.game is None:
            self.game = Game2048(size=self.size, rng=rng)
        else:
            self.game.rng = rng
            self.game.new_game()

        return self._get_observation(), self._get_info()

    def step(self, action):
        """take one step in the environment"""
        if self.game is None:
            raise RuntimeError("Call reset() before step()")
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action}")

        changed = self.game.push(self.action_to_direction[int(action)])
        reward = 1.0 if changed else 0.0

        observation = self._get_observation()
        terminated = self.game.game_over
        truncated = False

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, truncated, self._get_info(changed)

    def render(self):
        """display the game state"""
        text = format_board(self.game.grid)
        if self.render_mode == "ansi":
            return text
        print(text)
        return None

    def close(self):
        pass
