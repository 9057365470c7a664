from random import Random

import pytest

from snake_universe.components import Point
from snake_universe.errors import NoFreeCellError
from snake_universe.utils.placement import (
    interior_cells,
    is_interior,
    random_interior_point,
    random_interior_points,
)


def test_interior_cells_skip_border() -> None:
    cells = interior_cells(4, 5)
    assert len(cells) == 2 * 3
    assert all(is_interior(4, 5, c) for c in cells)
    assert Point(0, 1) not in cells
    assert Point(3, 1) not in cells


@pytest.mark.parametrize("seed", range(20))
def test_random_point_is_free_and_interior(seed: int) -> None:
    occupied = {Point(1, 1), Point(2, 2), Point(3, 3)}
    point = random_interior_point(6, 6, occupied, Random(seed))
    assert is_interior(6, 6, point)
    assert point not in occupied


def test_crowded_board_falls_back_to_scan() -> None:
    free = Point(4, 3)
    occupied = set(interior_cells(8, 6)) - {free}
    assert random_interior_point(8, 6, occupied, Random(0), max_attempts=1) == free


def test_full_interior_raises() -> None:
    with pytest.raises(NoFreeCellError):
        random_interior_point(4, 4, set(interior_cells(4, 4)), Random(0))


@pytest.mark.parametrize("width, height", [(2, 5), (5, 2), (0, 0)])
def test_board_without_interior_raises(width: int, height: int) -> None:
    with pytest.raises(NoFreeCellError):
        random_interior_point(width, height, set(), Random(0))


def test_points_are_distinct_and_avoid_occupied() -> None:
    occupied = {Point(2, 2)}
    points = random_interior_points(8, 8, occupied, Random(5), 10)
    assert len(points) == len(set(points)) == 10
    assert Point(2, 2) not in points


def test_points_stop_when_full() -> None:
    points = random_interior_points(4, 4, {Point(1, 1)}, Random(0), 10)
    assert sorted(points, key=lambda p: (p.y, p.x)) == [
        Point(2, 1),
        Point(1, 2),
        Point(2, 2),
    ]


def test_same_rng_seed_same_points() -> None:
    a = random_interior_points(12, 9, set(), Random(9), 6)
    b = random_interior_points(12, 9, set(), Random(9), 6)
    assert a == b
