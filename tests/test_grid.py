import pytest

from oreminer.env.grid import OreGrid
from oreminer.schema import GridSize, Position, TurnSnapshot
from oreminer.utils.errors import OutOfBoundsError


def make_grid(width: int = 6, height: int = 4) -> OreGrid:
    return OreGrid(GridSize(width=width, height=height))


def test_new_grid_is_fully_unknown():
    grid = make_grid()
    assert grid.unknown_fraction() == 1.0
    assert grid.total_ore() == 0
    assert grid.is_unknown(5, 3)


def test_set_cell_known_and_unknown():
    grid = make_grid()
    grid.set_cell(2, 1, 3, known=True)
    assert grid.ore_at(2, 1) == 3
    assert not grid.is_unknown(2, 1)

    grid.set_cell(2, 1, 7, known=False)
    assert grid.ore_at(2, 1) == 0
    assert grid.is_unknown(2, 1)


def test_aggregates_ignore_negative_reservations():
    grid = make_grid()
    grid.set_cell(1, 0, 2, known=True)
    grid.set_cell(3, 2, 1, known=True)
    assert grid.total_ore() == 3
    assert grid.unknown_fraction() == pytest.approx(22 / 24)

    grid.reserve(3, 2)
    assert grid.reserve(3, 2) == -1
    assert grid.ore_at(3, 2) == -1
    assert grid.total_ore() == 2


@pytest.mark.parametrize("x,y", [(-1, 0), (6, 0), (0, -1), (0, 4)])
def test_out_of_bounds_access_fails_fast(x, y):
    grid = make_grid()
    with pytest.raises(OutOfBoundsError):
        grid.ore_at(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.set_cell(x, y, 1, known=True)


def test_clamp_and_center():
    grid = make_grid(width=10, height=5)
    assert grid.clamp(-3, 9) == Position(x=0, y=4)
    assert grid.clamp(12, 2) == Position(x=9, y=2)
    assert grid.center() == Position(x=5, y=2)


def test_load_snapshot_replaces_previous_state():
    grid = make_grid(width=3, height=2)
    grid.set_cell(1, 1, 5, known=True)
    grid.reserve(1, 1)

    snapshot = TurnSnapshot(ore=[[None, 0, 2], [None, None, 1]])
    grid.load_snapshot(snapshot)

    assert grid.ore_at(1, 1) == 0
    assert grid.is_unknown(1, 1)
    assert grid.ore_at(2, 0) == 2
    assert grid.total_ore() == 3
    assert grid.unknown_fraction() == pytest.approx(3 / 6)


def test_load_snapshot_rejects_wrong_shape():
    grid = make_grid(width=3, height=2)
    with pytest.raises(OutOfBoundsError):
        grid.load_snapshot(TurnSnapshot(ore=[[0, 0, 0]]))


def test_copy_is_independent():
    grid = make_grid()
    grid.set_cell(4, 2, 2, known=True)
    clone = grid.copy()
    clone.reserve(4, 2)
    assert grid.ore_at(4, 2) == 2
    assert clone.ore_at(4, 2) == 1
