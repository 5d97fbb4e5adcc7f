"""Text boundary: decode boards from symbol rows and encode them back.

Terrain and occupants are decoded independently from the same symbols, so a
cell can be storage terrain and hold the agent or a marker at once:

====== ========= ========
Symbol Terrain   Occupant
====== ========= ========
``#``  wall      none
``*``  storage   none
``p``  open      agent
``P``  storage   agent
``b``  open      marker
``B``  storage   marker
other  open      none
====== ========= ========

Encoding is the inverse mapping using only these canonical symbols, so a
text -> State -> text round trip is equivalent, not byte-identical.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from pyrsistent import pset, pvector

from grid_sokoban.actions import parse_directions
from grid_sokoban.components import Position
from grid_sokoban.errors import MultipleAgentsFound, NoAgentFound
from grid_sokoban.objectives import default_objective_fn
from grid_sokoban.state import State
from grid_sokoban.step import step
from grid_sokoban.systems.terminal import win_system
from grid_sokoban.types import Cell, ObjectiveFn


WALL_SYMBOL = "#"
OPEN_SYMBOL = " "
STORAGE_SYMBOL = "*"
AGENT_SYMBOLS = ("p", "P")
MARKER_SYMBOLS = ("b", "B")

SYMBOL_TO_CELL: Dict[str, Cell] = {
    WALL_SYMBOL: Cell.WALL,
    STORAGE_SYMBOL: Cell.STORAGE,
    "P": Cell.STORAGE,  # agent on storage
    "B": Cell.STORAGE,  # marker on storage
}

CELL_TO_SYMBOL: Dict[Cell, str] = {
    Cell.OPEN: OPEN_SYMBOL,
    Cell.WALL: WALL_SYMBOL,
    Cell.STORAGE: STORAGE_SYMBOL,
}

# (terrain, is_agent, is_marker) -> symbol; anything else renders by terrain
OCCUPANT_TO_SYMBOL: Dict[tuple[Cell, bool, bool], str] = {
    (Cell.OPEN, True, False): "p",
    (Cell.STORAGE, True, False): "P",
    (Cell.OPEN, False, True): "b",
    (Cell.STORAGE, False, True): "B",
}


def cell_from_symbol(symbol: str) -> Cell:
    return SYMBOL_TO_CELL.get(symbol, Cell.OPEN)


def _positions_of(rows: Sequence[str], symbols: Iterable[str]) -> List[Position]:
    wanted = set(symbols)
    return [
        Position(x, y)
        for y, row in enumerate(rows)
        for x, symbol in enumerate(row)
        if symbol in wanted
    ]


def from_lines(
    lines: Iterable[str], objective_fn: ObjectiveFn = default_objective_fn
) -> State:
    """Build the initial ``State`` from rows of board symbols.

    Rows shorter than the widest row are padded with open cells.

    Raises:
        NoAgentFound: No ``p``/``P`` symbol in the input.
        MultipleAgentsFound: More than one agent symbol in the input.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    width = max((len(row) for row in rows), default=0)
    height = len(rows)

    grid = pvector(
        pvector(
            [cell_from_symbol(symbol) for symbol in row]
            + [Cell.OPEN] * (width - len(row))
        )
        for row in rows
    )

    agents = _positions_of(rows, AGENT_SYMBOLS)
    if not agents:
        raise NoAgentFound()
    if len(agents) > 1:
        raise MultipleAgentsFound(len(agents))

    state = State(
        width=width,
        height=height,
        grid=grid,
        objective_fn=objective_fn,
        agent=agents[0],
        markers=pset(_positions_of(rows, MARKER_SYMBOLS)),
    )
    # Levels may start solved
    return win_system(state)


def from_text(text: str, objective_fn: ObjectiveFn = default_objective_fn) -> State:
    """Build a ``State`` from a newline separated board.

    Blank leading and trailing lines are dropped; interior rows are kept
    as-is.
    """
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return from_lines(lines, objective_fn)


def load_level(path: str | Path, objective_fn: ObjectiveFn = default_objective_fn) -> State:
    text = Path(path).read_text(encoding="utf-8")
    return from_text(text, objective_fn)


def symbol_at(state: State, pos: Position) -> str:
    """Canonical output symbol for the cell at ``pos``."""
    terrain = state.grid[pos.y][pos.x]
    key = (terrain, pos == state.agent, pos in state.markers)
    return OCCUPANT_TO_SYMBOL.get(key, CELL_TO_SYMBOL[terrain])


def to_lines(state: State) -> List[str]:
    """Render ``state`` to one string per row."""
    return [
        "".join(symbol_at(state, Position(x, y)) for x in range(state.width))
        for y in range(state.height)
    ]


def to_text(state: State) -> str:
    return "\n".join(to_lines(state))


def process_moves(lines: Iterable[str], moves: str) -> List[str]:
    """Decode a board, apply every move in ``moves`` and render the result.

    The board and the whole move string are decoded before any move is
    applied. Any decoding or movement failure propagates to the caller; an
    empty move string returns the canonical rendering of the input board.
    """
    state = from_lines(lines)
    for direction in parse_directions(moves):
        state = step(state, direction)
    return to_lines(state)
