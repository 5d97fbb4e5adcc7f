"""Push interaction system.

Lets the agent push a marker sitting on the cell it is about to enter into
the next cell along the same direction, provided that cell is neither a wall
nor already holding a marker. Marker sets never hold duplicates, so at most
one marker is pushed per move.
"""

from pyrsistent.typing import PSet

from grid_sokoban.actions import Direction
from grid_sokoban.components import Position
from grid_sokoban.errors import MarkerBlockedByMarker, MarkerBlockedByWall
from grid_sokoban.state import State
from grid_sokoban.utils.grid import is_wall_at


def push_system(state: State, target: Position, direction: Direction) -> PSet[Position]:
    """Compute the marker set after the agent enters ``target``.

    Args:
        state (State): Current immutable state.
        target (Position): Cell the agent is moving into.
        direction (Direction): Direction of travel.

    Returns:
        PSet[Position]: ``state.markers`` itself if nothing is at ``target``,
        otherwise a new set with that marker moved one cell further.

    Raises:
        MarkerBlockedByWall: The pushed marker would land on a wall or off the board.
        MarkerBlockedByMarker: The pushed marker would land on another marker.
    """
    if target not in state.markers:
        return state.markers  # Nothing to push

    push_to = target.stepped(direction)
    # Wall is checked before marker collision
    if is_wall_at(state, push_to):
        raise MarkerBlockedByWall(push_to)
    if push_to in state.markers:
        raise MarkerBlockedByMarker(push_to)

    return state.markers.remove(target).add(push_to)
