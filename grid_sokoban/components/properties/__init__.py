"""Property component aggregates.

Re-exports the value objects that describe where things are on the board.
Terrain is not a component; it lives in ``State.grid`` as
:class:`grid_sokoban.types.Cell` values.
"""

from .position import Position

__all__ = [
    "Position",
]
