"""Error taxonomy.

Every condition here is an expected, recoverable outcome of decoding or of a
single transition. The engine raises them and never logs or prints; callers
decide whether to abort a batch, skip a move or report to a user.

Movement errors carry the offending destination ``position`` and a
:class:`MovementReason` so callers can branch on either the exception type or
the reason value.
"""

from enum import StrEnum, auto
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from grid_sokoban.components import Position


class SokobanError(Exception):
    """Base class for all engine errors."""


class UnrecognizedDirection(SokobanError, ValueError):
    """An input symbol maps to no known direction."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unrecognized direction symbol: {symbol!r}")
        self.symbol = symbol


class BoardError(SokobanError, ValueError):
    """Board construction failed; no ``State`` was produced."""


class NoAgentFound(BoardError):
    def __init__(self) -> None:
        super().__init__("Board contains no agent symbol")


class MultipleAgentsFound(BoardError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Board contains {count} agent symbols, expected exactly one")
        self.count = count


class MovementReason(StrEnum):
    AGENT_BLOCKED_BY_WALL = auto()
    MARKER_BLOCKED_BY_WALL = auto()
    MARKER_BLOCKED_BY_MARKER = auto()


class MovementError(SokobanError):
    """A transition was rejected. The prior state is untouched.

    The engine raises the subclasses below, which fix ``reason`` per class.
    Raising the base directly takes the reason as an argument.

    Attributes:
        reason (MovementReason): Which rule rejected the move.
        position (Position): Destination that could not be entered.
    """

    reason: Optional[MovementReason] = None

    def __init__(
        self, position: "Position", reason: Optional[MovementReason] = None
    ) -> None:
        if reason is not None:
            self.reason = reason
        label = self.reason.value if self.reason is not None else "movement_rejected"
        super().__init__(f"{label} at ({position.x}, {position.y})")
        self.position = position


class AgentBlockedByWall(MovementError):
    reason = MovementReason.AGENT_BLOCKED_BY_WALL


class MarkerBlockedByWall(MovementError):
    reason = MovementReason.MARKER_BLOCKED_BY_WALL


class MarkerBlockedByMarker(MovementError):
    reason = MovementReason.MARKER_BLOCKED_BY_MARKER
