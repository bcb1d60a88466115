"""Clock and water puzzles driven through the same solver."""

from __future__ import annotations

from tiltpuzzle.backend.engine.gamesolver import Solver
from tiltpuzzle.backend.models import ClockConfig, WaterConfig


# -- clock --------------------------------------------------------------------


def test_clock_successors_wrap() -> None:
    assert ClockConfig(1, hours=12, end=5).successors() == [
        ClockConfig(12, hours=12, end=5),
        ClockConfig(2, hours=12, end=5),
    ]
    assert ClockConfig(12, hours=12, end=5).successors() == [
        ClockConfig(11, hours=12, end=5),
        ClockConfig(1, hours=12, end=5),
    ]


def test_clock_shortest_way_round() -> None:
    result = Solver.search_bfs(ClockConfig(2, hours=12, end=7))
    assert [c.current for c in result.path] == [2, 3, 4, 5, 6, 7]

    result = Solver.search_bfs(ClockConfig(2, hours=12, end=11))
    assert [c.current for c in result.path] == [2, 1, 12, 11]


def test_clock_unreachable_hour() -> None:
    result = Solver.search_bfs(ClockConfig(2, hours=12, end=13))
    assert result.path is None
    assert result.unique_configurations == 12


def test_clock_validity() -> None:
    assert ClockConfig(12, hours=12, end=1).is_valid()
    assert not ClockConfig(13, hours=12, end=1).is_valid()


# -- water --------------------------------------------------------------------


def test_water_successor_order() -> None:
    start = WaterConfig.empty((3, 5), amount=4)
    assert [w.buckets for w in start.successors()] == [
        (3, 0), (0, 0), (0, 0),
        (0, 5), (0, 0), (0, 0),
    ]


def test_water_pour_limited_by_room() -> None:
    state = WaterConfig((1, 5), capacities=(3, 5), amount=4)
    # pour bucket 1 into bucket 0: only two units fit
    assert WaterConfig((3, 3), capacities=(3, 5), amount=4) in state.successors()


def test_water_die_hard() -> None:
    result = Solver.search_bfs(WaterConfig.empty((3, 5), amount=4))
    assert result.path is not None
    assert len(result.path) == 7
    assert 4 in result.path[-1].buckets
    for prev, nxt in zip(result.path, result.path[1:]):
        assert nxt in prev.successors()


def test_water_unreachable_amount() -> None:
    result = Solver.search_bfs(WaterConfig.empty((2, 4), amount=3))
    assert result.path is None


def test_water_str() -> None:
    assert str(WaterConfig((1, 2), capacities=(3, 5), amount=4)) == "[1, 2]"
