"""Radar placement scoring: how many unknown cells a radar would reveal."""

from __future__ import annotations

from typing import List, Tuple

from oreminer.env.grid import OreGrid
from oreminer.schema import Position

# Radars cannot be dug into the base column and it holds no ore worth revealing.
FIRST_FIELD_COLUMN = 1


def _diamond_offsets(radius: int) -> List[Tuple[int, int]]:
    return [
        (dx, dy)
        for dy in range(-radius, radius + 1)
        for dx in range(-(radius - abs(dy)), radius - abs(dy) + 1)
    ]


def radar_values(grid: OreGrid, radius: int) -> List[List[int]]:
    """Return a row-major table of unknown cells revealed per radar position."""

    width, height = grid.size.width, grid.size.height
    offsets = _diamond_offsets(radius)
    values = [[0] * width for _ in range(height)]
    for y in range(height):
        for x in range(FIRST_FIELD_COLUMN, width):
            count = 0
            for dx, dy in offsets:
                nx, ny = x + dx, y + dy
                if nx < FIRST_FIELD_COLUMN or nx >= width or ny < 0 or ny >= height:
                    continue
                if grid.is_unknown(nx, ny):
                    count += 1
            values[y][x] = count
    return values


def best_radar_position(grid: OreGrid, radius: int) -> Position:
    """Pick the radar cell with the highest score, nearest to base on ties.

    Returns ``(0, 0)`` when no placement reveals anything; callers gate radar
    use on the unknown fraction instead of inspecting this result.
    """

    values = radar_values(grid, radius)
    best = Position(x=0, y=0)
    largest = 0
    closest = grid.size.width
    for y, row in enumerate(values):
        for x in range(FIRST_FIELD_COLUMN, grid.size.width):
            value = row[x]
            if value > largest or (value == largest and value > 0 and x < closest):
                largest = value
                closest = x
                best = Position(x=x, y=y)
    return best
