"""grid_sokoban.components
=================================

Aggregate import surface for the value objects used by the engine, e.g.::

    from grid_sokoban.components import Position

All component classes are frozen ``@dataclass`` values; systems never mutate
them, they build new ones.
"""

from .properties import Position

__all__ = [
    "Position",
]
