from typing import List, Tuple, Type

import pytest

from grid_sokoban.actions import Direction, MOVE_DIRECTIONS, parse_directions
from grid_sokoban.components import Position
from grid_sokoban.errors import (
    AgentBlockedByWall,
    MarkerBlockedByMarker,
    MarkerBlockedByWall,
    MovementError,
)
from grid_sokoban.levels.convert import from_lines, to_lines
from grid_sokoban.state import State
from grid_sokoban.step import step
from grid_sokoban.utils.terminal import is_valid_state
from tests.test_utils import CHALLENGE_LINES, make_state, marker_tuples


def test_plain_move() -> None:
    state = make_state((2, 2))
    new_state = step(state, Direction.UP)
    assert new_state.agent == Position(2, 1)
    assert new_state.turn == 1
    assert new_state.pushes == 0
    assert state.agent == Position(2, 2)


def test_push_moves_agent_and_marker_only() -> None:
    state = make_state((0, 2), [(1, 2), (1, 0), (3, 4)])
    new_state = step(state, Direction.RIGHT)
    assert new_state.agent == Position(1, 2)
    assert marker_tuples(new_state) == [(1, 0), (2, 2), (3, 4)]
    assert new_state.pushes == 1


@pytest.mark.parametrize(
    "agent_pos, marker_positions, wall_positions, direction, error_type, error_pos",
    [
        ((2, 2), [], [(2, 1)], Direction.UP, AgentBlockedByWall, (2, 1)),
        ((4, 2), [], [], Direction.RIGHT, AgentBlockedByWall, (5, 2)),
        ((2, 2), [(3, 2)], [(4, 2)], Direction.RIGHT, MarkerBlockedByWall, (4, 2)),
        ((2, 3), [(2, 4)], [], Direction.DOWN, MarkerBlockedByWall, (2, 5)),
        ((2, 2), [(1, 2), (0, 2)], [], Direction.LEFT, MarkerBlockedByMarker, (0, 2)),
    ],
)
def test_rejected_move_leaves_state_identical(
    agent_pos: Tuple[int, int],
    marker_positions: List[Tuple[int, int]],
    wall_positions: List[Tuple[int, int]],
    direction: Direction,
    error_type: Type[MovementError],
    error_pos: Tuple[int, int],
) -> None:
    state = make_state(agent_pos, marker_positions, wall_positions)
    before = (state.agent, set(state.markers), state.grid, state.turn, state.pushes)

    with pytest.raises(error_type) as excinfo:
        step(state, direction)

    assert excinfo.value.position == Position(*error_pos)
    assert (state.agent, set(state.markers), state.grid, state.turn, state.pushes) == before


def test_wall_check_precedes_marker_collision() -> None:
    # Cell beyond the pushed marker is both a wall and (invalidly) a marker
    state = make_state((0, 0), [(1, 0), (2, 0)], wall_positions=[(2, 0)])
    with pytest.raises(MarkerBlockedByWall):
        step(state, Direction.RIGHT)


@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_wall_impenetrability(direction: Direction) -> None:
    walls = [(2, 1), (2, 3), (1, 2), (3, 2)]
    state = make_state((2, 2), wall_positions=walls)
    with pytest.raises(AgentBlockedByWall):
        step(state, direction)
    assert state.agent == Position(2, 2)


def test_determinism() -> None:
    state = make_state((0, 2), [(1, 2)])
    assert step(state, Direction.RIGHT) == step(state, Direction.RIGHT)

    blocked = make_state((0, 2), [(1, 2), (2, 2)])
    errors = []
    for _ in range(2):
        with pytest.raises(MarkerBlockedByMarker) as excinfo:
            step(blocked, Direction.RIGHT)
        errors.append((excinfo.value.reason, excinfo.value.position))
    assert errors[0] == errors[1]


def test_rejects_non_direction() -> None:
    state = make_state((2, 2))
    with pytest.raises(ValueError):
        step(state, "R")  # type: ignore[arg-type]


def test_win_flag_follows_objective() -> None:
    state = make_state((0, 0), [(1, 0)], storage_positions=[(2, 0)])
    solved = step(state, Direction.RIGHT)
    assert solved.win

    # Moving on is allowed; pushing the marker off storage clears the flag
    pushed_off = step(solved, Direction.RIGHT)
    assert pushed_off.agent == Position(2, 0)
    assert marker_tuples(pushed_off) == [(3, 0)]
    assert not pushed_off.win


def test_challenge_scenario() -> None:
    state = from_lines(CHALLENGE_LINES)
    assert state.agent == Position(1, 1)
    assert marker_tuples(state) == [(6, 2), (9, 2)]

    for direction in parse_directions("RRRRR"):
        state = step(state, direction)
    assert state.agent == Position(6, 1)
    assert marker_tuples(state) == [(6, 2), (9, 2)]

    state = step(state, Direction.DOWN)
    assert state.agent == Position(6, 2)
    assert marker_tuples(state) == [(6, 3), (9, 2)]
    assert is_valid_state(state)


def test_challenge_full_solution() -> None:
    state: State = from_lines(CHALLENGE_LINES)
    for direction in parse_directions("RRRRRDRDLLLLRRRRRRULUR"):
        state = step(state, direction)
        assert is_valid_state(state)

    assert state.agent == Position(9, 1)
    assert marker_tuples(state) == [(2, 3), (10, 1)]
    assert state.turn == 22
    assert state.pushes == 7
    assert state.win
    assert to_lines(state) == [
        "#############",
        "#        pB #",
        "#           #",
        "# B         #",
        "#############",
    ]
