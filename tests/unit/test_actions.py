import pytest

from grid_sokoban.actions import (
    Direction,
    GymAction,
    direction_from_symbol,
    iter_directions,
    parse_directions,
)
from grid_sokoban.errors import UnrecognizedDirection


@pytest.mark.parametrize(
    "symbol, expected",
    [
        ("U", Direction.UP),
        ("D", Direction.DOWN),
        ("L", Direction.LEFT),
        ("R", Direction.RIGHT),
        ("u", Direction.UP),
        ("d", Direction.DOWN),
        ("l", Direction.LEFT),
        ("r", Direction.RIGHT),
    ],
)
def test_direction_from_symbol(symbol: str, expected: Direction) -> None:
    assert direction_from_symbol(symbol) == expected


@pytest.mark.parametrize("symbol", ["X", " ", "", "UD", "1", "↑"])
def test_unrecognized_symbol_carries_symbol(symbol: str) -> None:
    with pytest.raises(UnrecognizedDirection) as excinfo:
        direction_from_symbol(symbol)
    assert excinfo.value.symbol == symbol


def test_unrecognized_direction_is_value_error() -> None:
    with pytest.raises(ValueError):
        direction_from_symbol("?")


def test_parse_directions_in_order() -> None:
    assert parse_directions("RRdL") == [
        Direction.RIGHT,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]


def test_parse_directions_empty() -> None:
    assert parse_directions("") == []


def test_parse_directions_returns_nothing_on_late_failure() -> None:
    result = None
    with pytest.raises(UnrecognizedDirection) as excinfo:
        result = parse_directions("RRRX")
    assert result is None
    assert excinfo.value.symbol == "X"


def test_iter_directions_is_lazy() -> None:
    it = iter_directions("RX")
    assert next(it) == Direction.RIGHT
    with pytest.raises(UnrecognizedDirection):
        next(it)


def test_symbol_round_trip() -> None:
    for direction in Direction:
        assert direction_from_symbol(direction.symbol) == direction


def test_gym_action_mapping() -> None:
    assert [a.to_direction() for a in GymAction] == [
        Direction.UP,
        Direction.DOWN,
        Direction.LEFT,
        Direction.RIGHT,
    ]
    assert GymAction.UP == 0
