"""Gymnasium environment wrapper for grid-sokoban.

Observations are ``np.ndarray(H, W)`` of ``int8`` cell codes combining
terrain and occupant (see :data:`OBSERVATION_CODES`). Reward is shaped per
step: a small step penalty, +1 for each marker newly placed on storage, -1 for
each marker pushed off storage and a bonus when the objective is reached.
``terminated`` is ``True`` on win, ``truncated`` after ``max_steps`` actions
(rejected moves included).

A rejected move is not an episode-ending event: the state is left untouched,
the step penalty applies and ``info["error"]`` carries the rejection reason.

Usage:

``env = SokobanEnv(level_name="challenge", render_mode="ansi")``
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from grid_sokoban.actions import GymAction
from grid_sokoban.errors import MovementError
from grid_sokoban.examples.levels import LEVEL_REGISTRY
from grid_sokoban.levels.convert import from_lines, to_text
from grid_sokoban.objectives import OBJECTIVE_FN_REGISTRY, stored_marker_count
from grid_sokoban.renderer.image import DEFAULT_RESOLUTION, ImageRenderer
from grid_sokoban.state import State
from grid_sokoban.step import step
from grid_sokoban.types import Cell

logger = logging.getLogger(__name__)

ObsType = np.ndarray

# (terrain, is_agent, is_marker) -> observation code
OBSERVATION_CODES: Dict[Tuple[Cell, bool, bool], int] = {
    (Cell.OPEN, False, False): 0,
    (Cell.WALL, False, False): 1,
    (Cell.OPEN, False, True): 2,
    (Cell.STORAGE, False, False): 3,
    (Cell.OPEN, True, False): 4,
    (Cell.STORAGE, False, True): 5,
    (Cell.STORAGE, True, False): 6,
}

STEP_PENALTY = -0.1
STORED_REWARD = 1.0
UNSTORED_PENALTY = -1.0
WIN_REWARD = 10.0


def observation_array(state: State) -> ObsType:
    """Encode ``state`` into the ``(height, width)`` observation grid."""
    obs = np.zeros((state.height, state.width), dtype=np.int8)
    for y, row in enumerate(state.grid):
        for x, terrain in enumerate(row):
            obs[y, x] = OBSERVATION_CODES[(terrain, False, False)]
    for marker in state.markers:
        terrain = state.grid[marker.y][marker.x]
        obs[marker.y, marker.x] = OBSERVATION_CODES[(terrain, False, True)]
    terrain = state.grid[state.agent.y][state.agent.x]
    obs[state.agent.y, state.agent.x] = OBSERVATION_CODES[(terrain, True, False)]
    return obs


def status_info_dict(state: State) -> Dict[str, Any]:
    """Status portion of the info dict (turn, pushes, phase)."""
    return {
        "turn": int(state.turn),
        "pushes": int(state.pushes),
        "stored": stored_marker_count(state),
        "markers": len(state.markers),
        "phase": "win" if state.win else "ongoing",
    }


class SokobanEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for a single Sokoban level.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_sokoban.actions`.
    """

    metadata = {"render_modes": ["ansi", "rgb_array"]}

    def __init__(
        self,
        level: Optional[Sequence[str]] = None,
        level_name: str = "challenge",
        objective: str = "default",
        max_steps: int = 200,
        render_mode: Optional[str] = None,
        render_resolution: int = DEFAULT_RESOLUTION,
    ):
        """Create a new environment instance.

        Arguments:
            level: Symbol rows for the level. Overrides ``level_name``.
            level_name: Key into :data:`grid_sokoban.examples.levels.LEVEL_REGISTRY`.
            objective: Key into :data:`grid_sokoban.objectives.OBJECTIVE_FN_REGISTRY`.
            max_steps: Actions (including rejected ones) after which the episode is truncated.
            render_mode: "ansi" for text frames, "rgb_array" for image arrays.
            render_resolution: Width (pixels) of rendered images.
        """
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode!r}")

        self._level: List[str] = list(level) if level is not None else list(LEVEL_REGISTRY[level_name])
        self._objective_fn = OBJECTIVE_FN_REGISTRY[objective]
        self.max_steps = max_steps
        self.render_mode = render_mode
        self._renderer = ImageRenderer(resolution=render_resolution)

        self.state: State = from_lines(self._level, self._objective_fn)
        self._elapsed = 0

        self.observation_space = spaces.Box(
            low=0,
            high=max(OBSERVATION_CODES.values()),
            shape=(self.state.height, self.state.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode from the configured level.

        Arguments:
            seed: Forwarded to ``gym.Env.reset`` (levels are deterministic).
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = from_lines(self._level, self._objective_fn)
        self._elapsed = 0
        return observation_array(self.state), status_info_dict(self.state)

    def step(
        self, action: np.integer | int
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one action.

        Returns:
            Observation, reward, terminated, truncated, info.
        """
        direction = GymAction(int(action)).to_direction()
        self._elapsed += 1
        info: Dict[str, Any] = {}
        reward = STEP_PENALTY

        stored_before = stored_marker_count(self.state)
        try:
            self.state = step(self.state, direction)
        except MovementError as error:
            logger.debug("Rejected %s: %s", direction, error)
            info["error"] = error.reason.value
            info["error_position"] = error.position.as_tuple()
        else:
            stored_after = stored_marker_count(self.state)
            if stored_after > stored_before:
                reward += STORED_REWARD * (stored_after - stored_before)
            elif stored_after < stored_before:
                reward += UNSTORED_PENALTY * (stored_before - stored_after)
            if self.state.win:
                reward += WIN_REWARD

        info.update(status_info_dict(self.state))
        terminated = self.state.win
        truncated = not terminated and self._elapsed >= self.max_steps
        return observation_array(self.state), reward, terminated, truncated, info

    def render(self) -> Optional[Any]:  # type: ignore[override]
        if self.render_mode == "ansi":
            return to_text(self.state)
        if self.render_mode == "rgb_array":
            return np.asarray(self._renderer.render(self.state).convert("RGB"))
        return None

    def close(self) -> None:
        pass
