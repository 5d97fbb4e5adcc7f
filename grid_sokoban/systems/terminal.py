"""Terminal condition and bookkeeping systems.

Runs after a transition has been committed: advances counters and
re-evaluates the objective so ``state.win`` always reflects the latest board.
"""

from dataclasses import replace

from grid_sokoban.state import State


def win_system(state: State) -> State:
    """Set ``win`` from the objective function (idempotent)."""
    win = bool(state.objective_fn(state))
    if win == state.win:
        return state
    return replace(state, win=win)


def turn_system(state: State, pushed: bool) -> State:
    """Advance the turn counter and, if a marker moved, the push counter."""
    return replace(
        state,
        turn=state.turn + 1,
        pushes=state.pushes + (1 if pushed else 0),
    )
