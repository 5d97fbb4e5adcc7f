"""Position component.

Immutable integer grid coordinates. Used for the agent (``State.agent``) and
for every marker (members of ``State.markers``).
"""

from dataclasses import dataclass

from grid_sokoban.actions import Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def stepped(self, direction: Direction) -> "Position":
        """Return the neighbouring coordinate one unit along ``direction``.

        No bounds are applied; callers check the grid.
        """
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"(x: {self.x}, y: {self.y})"
