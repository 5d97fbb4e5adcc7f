"""Built-in puzzle levels.

Levels are stored as symbol rows (see :mod:`grid_sokoban.levels.convert`) and
decoded on demand, so each call returns a fresh initial ``State``.
"""

from __future__ import annotations

from typing import Dict, List

from grid_sokoban.levels.convert import from_lines
from grid_sokoban.objectives import default_objective_fn
from grid_sokoban.state import State
from grid_sokoban.types import ObjectiveFn


# Two markers on row 2, storage at (10, 1) and (2, 3).
CHALLENGE_LEVEL: List[str] = [
    "#############",
    "#p        * #",
    "#     b  b  #",
    "# *         #",
    "#############",
]

# Solved by "RRR".
CORRIDOR_LEVEL: List[str] = [
    "#######",
    "#p b *#",
    "#######",
]

# Agent already on storage; one marker must go round a corner.
CORNER_LEVEL: List[str] = [
    "######",
    "#P   #",
    "# b  #",
    "#   *#",
    "######",
]

LEVEL_REGISTRY: Dict[str, List[str]] = {
    "challenge": CHALLENGE_LEVEL,
    "corridor": CORRIDOR_LEVEL,
    "corner": CORNER_LEVEL,
}
"""Registry of built-in level names to symbol rows."""


def load_builtin(name: str, objective_fn: ObjectiveFn = default_objective_fn) -> State:
    """Decode the registered level ``name``.

    Raises:
        KeyError: If ``name`` is not registered.
    """
    if name not in LEVEL_REGISTRY:
        raise KeyError(f"Unknown level {name!r}; choose from {sorted(LEVEL_REGISTRY)}")
    return from_lines(LEVEL_REGISTRY[name], objective_fn)
