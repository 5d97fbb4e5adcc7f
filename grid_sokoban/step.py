"""State reducer and move-sequence driver.

This module wires the systems together to implement a single *turn*
transition for a ``Direction``. The exported :func:`step` is the only entry
point for gameplay progression and is pure: it returns a *new*
:class:`grid_sokoban.state.State` or raises a
:class:`grid_sokoban.errors.MovementError`.

Ordering:

1. ``movement_system`` resolves the agent's destination (wall check).
2. ``push_system`` computes the marker set after any push (wall, then marker
   collision check).
3. Only when both succeed is the new state built, counters advanced and the
   objective re-evaluated. Validation never touches the input state, so a
   rejected move needs no rollback.

:func:`run_moves` folds :func:`step` over a sequence and stops at the first
rejection, reporting it together with the last valid state.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional, Tuple

from grid_sokoban.actions import Direction
from grid_sokoban.errors import MovementError
from grid_sokoban.state import State
from grid_sokoban.systems.movement import movement_system
from grid_sokoban.systems.push import push_system
from grid_sokoban.systems.terminal import turn_system, win_system


def step(state: State, direction: Direction) -> State:
    """Advance the puzzle by one move.

    Args:
        state (State): Previous immutable state.
        direction (Direction): Direction to move the agent.

    Returns:
        State: Next state snapshot with the agent (and possibly one marker)
            moved one cell.

    Raises:
        AgentBlockedByWall: The agent's destination is a wall.
        MarkerBlockedByWall: A pushed marker's destination is a wall.
        MarkerBlockedByMarker: A pushed marker's destination holds a marker.
        ValueError: If ``direction`` is not a :class:`Direction`.
    """
    if not isinstance(direction, Direction):
        raise ValueError(f"Direction is not valid: {direction!r}")

    target = movement_system(state, direction)
    markers = push_system(state, target, direction)

    pushed = markers is not state.markers
    state = replace(state, agent=target, markers=markers)
    state = turn_system(state, pushed)
    return win_system(state)


def iter_steps(state: State, directions: Iterable[Direction]) -> Iterator[State]:
    """Yield the state after each move, raising at the first rejected one."""
    for direction in directions:
        state = step(state, direction)
        yield state


@dataclass(frozen=True)
class MoveRun:
    """Outcome of applying a move sequence with abort-on-first-failure.

    Attributes:
        state (State): Last valid state (the final one if every move applied).
        applied (int): Number of moves committed before stopping.
        error (MovementError | None): The rejection that stopped the run.
        history (Tuple[State, ...]): Initial state followed by each committed state.
    """

    state: State
    applied: int
    error: Optional[MovementError] = None
    history: Tuple[State, ...] = field(default=(), repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None


def run_moves(state: State, directions: Iterable[Direction]) -> MoveRun:
    """Apply ``directions`` in order, stopping at the first rejected move.

    Later moves are never attempted after a rejection; the bad move is not
    skipped.
    """
    history = [state]
    try:
        for next_state in iter_steps(state, directions):
            history.append(next_state)
    except MovementError as error:
        return MoveRun(
            state=history[-1],
            applied=len(history) - 1,
            error=error,
            history=tuple(history),
        )
    return MoveRun(state=history[-1], applied=len(history) - 1, history=tuple(history))
