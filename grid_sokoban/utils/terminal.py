"""State validity helper predicates."""

from grid_sokoban.state import State
from grid_sokoban.utils.grid import is_wall_at


def has_rectangular_grid(state: State) -> bool:
    """Return True if ``grid`` matches ``width`` x ``height``."""
    return len(state.grid) == state.height and all(
        len(row) == state.width for row in state.grid
    )


def is_valid_state(state: State) -> bool:
    """Return True if every board invariant holds.

    Checks the grid shape, that the agent and every marker are in bounds and
    off walls, and that the agent does not share a cell with a marker.
    Duplicate markers are impossible because ``markers`` is a set.
    """
    if not has_rectangular_grid(state):
        return False
    if is_wall_at(state, state.agent):
        return False
    if state.agent in state.markers:
        return False
    return not any(is_wall_at(state, marker) for marker in state.markers)
