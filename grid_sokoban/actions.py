"""Direction enumerations and move-string decoding.

Defines the human readable :class:`Direction` (string enum) used by the
transition and a stable integer :class:`GymAction` mapping for Gymnasium
compatibility.

Direction symbols are single characters (``U``, ``D``, ``L``, ``R``) and are
accepted case-insensitively. A move string is a flat run of such symbols with
no separators.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Iterable, Iterator, List, Tuple

from grid_sokoban.errors import UnrecognizedDirection


class Direction(StrEnum):
    """String enum of the four compass directions.

    Rows grow downward, so ``UP`` decreases ``y`` and ``DOWN`` increases it.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        """``(dx, dy)`` unit offset for this direction."""
        return MOVE_DELTAS[self]

    @property
    def symbol(self) -> str:
        """Canonical (upper-case) input symbol."""
        return DIRECTION_TO_SYMBOL[self]


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

MOVE_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

SYMBOL_TO_DIRECTION: Dict[str, Direction] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}

DIRECTION_TO_SYMBOL: Dict[Direction, str] = {
    direction: symbol for symbol, direction in SYMBOL_TO_DIRECTION.items()
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def to_direction(self) -> Direction:
        return Direction[self.name]


def direction_from_symbol(symbol: str) -> Direction:
    """Decode a single direction symbol.

    Raises:
        UnrecognizedDirection: If ``symbol`` is not exactly one of ``UDLR``
            (either case).
    """
    direction = SYMBOL_TO_DIRECTION.get(symbol.upper()) if len(symbol) == 1 else None
    if direction is None:
        raise UnrecognizedDirection(symbol)
    return direction


def iter_directions(symbols: Iterable[str]) -> Iterator[Direction]:
    """Lazily decode ``symbols`` in order, failing at the first bad one."""
    for symbol in symbols:
        yield direction_from_symbol(symbol)


def parse_directions(symbols: Iterable[str]) -> List[Direction]:
    """Decode a whole move string.

    Either every symbol decodes and the full list is returned, or
    :class:`UnrecognizedDirection` is raised and nothing is returned.
    """
    return list(iter_directions(symbols))
