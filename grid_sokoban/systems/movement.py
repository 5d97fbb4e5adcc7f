"""Agent movement system.

Resolves the cell the agent is trying to enter for a direction and rejects
the move when that cell is a wall (or off the board). Marker handling happens
in :mod:`grid_sokoban.systems.push`; this system only answers *where* the
agent would go.
"""

from grid_sokoban.actions import Direction
from grid_sokoban.components import Position
from grid_sokoban.errors import AgentBlockedByWall
from grid_sokoban.state import State
from grid_sokoban.utils.grid import is_wall_at


def movement_system(state: State, direction: Direction) -> Position:
    """Return the agent's destination for ``direction``.

    Args:
        state (State): Current state.
        direction (Direction): Requested direction.

    Returns:
        Position: The adjacent cell the agent would occupy.

    Raises:
        AgentBlockedByWall: If the destination is a wall or out of bounds.
    """
    target = state.agent.stepped(direction)
    if is_wall_at(state, target):
        raise AgentBlockedByWall(target)
    return target
