"""Grid math / collision helpers.

Utility predicates used by the movement & push systems. Functions here are
pure and intentionally lightweight.
"""

from typing import List

from grid_sokoban.components import Position
from grid_sokoban.state import State
from grid_sokoban.types import Cell


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the level rectangle."""
    return 0 <= pos.x < state.width and 0 <= pos.y < state.height


def cell_at(state: State, pos: Position) -> Cell:
    """Terrain at ``pos``. Caller guarantees ``pos`` is in bounds."""
    return state.grid[pos.y][pos.x]


def is_wall_at(state: State, pos: Position) -> bool:
    """Return True if ``pos`` cannot be entered.

    Cells outside the grid count as walls so that occupants can never leave
    the board, even when a level has no surrounding wall.
    """
    return not is_in_bounds(state, pos) or cell_at(state, pos) == Cell.WALL


def is_storage_at(state: State, pos: Position) -> bool:
    return is_in_bounds(state, pos) and cell_at(state, pos) == Cell.STORAGE


def positions_of(state: State, cell: Cell) -> List[Position]:
    """All positions whose terrain equals ``cell``, row-major order."""
    return [
        Position(x, y)
        for y, row in enumerate(state.grid)
        for x, terrain in enumerate(row)
        if terrain == cell
    ]
