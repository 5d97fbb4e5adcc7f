"""Objective predicate functions and registry.

Each objective function answers: *"Is the puzzle in a winning position?"*
They are pure predicates over a :class:`State`. The transition evaluates
``state.objective_fn`` after each committed move to set ``state.win``.
"""

from typing import Dict

from grid_sokoban.state import State
from grid_sokoban.types import ObjectiveFn
from grid_sokoban.utils.grid import is_storage_at


def all_markers_stored_objective_fn(state: State) -> bool:
    """Every marker occupies a storage cell (and there is at least one marker)."""
    if not state.markers:
        return False
    return all(is_storage_at(state, marker) for marker in state.markers)


def never_objective_fn(state: State) -> bool:
    """Free play: the puzzle is never considered won."""
    return False


def default_objective_fn(state: State) -> bool:
    return all_markers_stored_objective_fn(state)


def stored_marker_count(state: State) -> int:
    """Number of markers currently on storage cells."""
    return sum(1 for marker in state.markers if is_storage_at(state, marker))


OBJECTIVE_FN_REGISTRY: Dict[str, ObjectiveFn] = {
    "default": default_objective_fn,
    "all_markers_stored": all_markers_stored_objective_fn,
    "never": never_objective_fn,
}
"""Registry of built-in objective names to callables."""
