"""Common type aliases and enumerations.

``ObjectiveFn`` is the extension point stored on ``State`` to allow pluggable
win condition behavior.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING

from pyrsistent.typing import PVector


# Forward declaration for ObjectiveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_sokoban.state import State


class Cell(StrEnum):
    """Terrain classification of a single tile.

    Only ``WALL`` blocks movement. ``STORAGE`` is a placement target for
    markers and behaves like ``OPEN`` for the movement rules.
    """

    OPEN = auto()
    WALL = auto()
    STORAGE = auto()


Grid = PVector[PVector[Cell]]

ObjectiveFn = Callable[["State"], bool]
