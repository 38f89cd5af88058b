import random

from oreminer.env.coverage import best_radar_position, radar_values
from oreminer.env.grid import OreGrid
from oreminer.schema import GridSize, Position


def make_known_grid(width: int, height: int) -> OreGrid:
    grid = OreGrid(GridSize(width=width, height=height))
    for y in range(height):
        for x in range(width):
            grid.set_cell(x, y, 0, known=True)
    return grid


def brute_force_score(grid: OreGrid, cx: int, cy: int, radius: int) -> int:
    count = 0
    for y in range(grid.size.height):
        for x in range(1, grid.size.width):
            if abs(x - cx) + abs(y - cy) <= radius and grid.is_unknown(x, y):
                count += 1
    return count


def test_scores_match_brute_force_count():
    rng = random.Random(5)
    grid = make_known_grid(12, 7)
    for y in range(7):
        for x in range(12):
            if rng.random() < 0.5:
                grid.set_cell(x, y, None, known=False)

    values = radar_values(grid, 4)
    for y in range(7):
        assert values[y][0] == 0
        for x in range(1, 12):
            assert values[y][x] == brute_force_score(grid, x, y, 4)


def test_single_unknown_cell_diamond():
    grid = make_known_grid(9, 9)
    grid.set_cell(4, 4, None, known=False)
    values = radar_values(grid, 2)
    assert values[4][4] == 1
    assert values[4][6] == 1
    assert values[5][5] == 1
    assert values[6][5] == 0
    assert values[4][7] == 0


def test_scores_never_increase_as_cells_become_known():
    grid = OreGrid(GridSize(width=10, height=6))
    before = radar_values(grid, 4)
    assert radar_values(grid, 4) == before

    grid.set_cell(5, 3, 2, known=True)
    grid.set_cell(2, 1, 0, known=True)
    after = radar_values(grid, 4)
    for y in range(6):
        for x in range(10):
            assert after[y][x] <= before[y][x]


def test_all_known_returns_degenerate_origin():
    grid = make_known_grid(8, 5)
    assert best_radar_position(grid, 4) == Position(x=0, y=0)


def test_best_position_is_strict_maximum():
    grid = make_known_grid(15, 9)
    for y in range(2, 7):
        for x in range(9, 14):
            grid.set_cell(x, y, None, known=False)
    assert best_radar_position(grid, 4) == Position(x=11, y=4)


def test_tie_prefers_column_closest_to_base():
    # Two isolated unknown cells give two equal maxima; the left one wins
    # even though it is scanned after the right one.
    grid = make_known_grid(20, 12)
    grid.set_cell(15, 1, None, known=False)
    grid.set_cell(8, 10, None, known=False)
    radius = 1
    best = best_radar_position(grid, radius)
    assert best.x == 7
    assert abs(best.x - 8) + abs(best.y - 10) <= radius


def test_symmetric_pattern_choice_is_stable():
    grid = make_known_grid(11, 11)
    for x, y in [(3, 5), (7, 5)]:
        grid.set_cell(x, y, None, known=False)
    first = best_radar_position(grid, 4)
    assert first == best_radar_position(grid.copy(), 4)
    assert first == Position(x=3, y=5)


def test_base_column_is_never_chosen_or_counted():
    grid = make_known_grid(6, 3)
    for y in range(3):
        grid.set_cell(0, y, None, known=False)
    assert all(value == 0 for row in radar_values(grid, 4) for value in row)
    assert best_radar_position(grid, 4) == Position(x=0, y=0)
