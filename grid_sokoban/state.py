"""Core immutable board `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole puzzle at a single turn. The transition in :mod:`grid_sokoban.step` is a
pure function that takes a previous ``State`` plus a ``Direction`` and returns
a *new* ``State`` or raises; nothing is mutated in place. A rejected move is
therefore observably a no-op for the caller.

Design notes:

* ``grid`` is a persistent vector of rows (``grid[y][x]``) fixed at
    construction. Only ``agent``, ``markers`` and the bookkeeping counters
    change between turns.
* ``markers`` is a persistent set of positions, which rules out two markers
    sharing a cell by construction.
* ``win`` is re-evaluated from ``objective_fn`` after every committed
    transition. It is informational and does not stop further moves.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap, pset
from pyrsistent.typing import PMap, PSet

from grid_sokoban.components import Position
from grid_sokoban.types import Grid, ObjectiveFn


@dataclass(frozen=True)
class State:
    """Immutable puzzle state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        grid (Grid): Terrain rows, indexed ``grid[y][x]``.
        agent (Position): Current agent position.
        objective_fn (ObjectiveFn): Predicate evaluated after each step to set ``win``.
        markers (PSet[Position]): Current marker positions.
        turn (int): Number of committed transitions.
        pushes (int): Number of committed transitions that moved a marker.
        win (bool): True if the objective held after the last transition.
    """

    # Level
    width: int
    height: int
    grid: Grid
    objective_fn: ObjectiveFn

    # Occupants
    agent: Position
    markers: PSet[Position] = pset()

    # Status
    turn: int = 0
    pushes: int = 0
    win: bool = False

    @property
    def description(self) -> PMap[str, Any]:
        """Compact serialization of the occupant and status fields.

        Leaves out the terrain and the objective callable, which never change
        over a game, so two descriptions can be diffed turn to turn.
        """
        return pmap(
            {
                "agent": self.agent.as_tuple(),
                "markers": sorted(marker.as_tuple() for marker in self.markers),
                "turn": self.turn,
                "pushes": self.pushes,
                "win": self.win,
            }
        )
