"""Belief model of the ore field: known ore counts and unknown cells."""

from __future__ import annotations

from typing import List, Optional

from oreminer.schema import GridSize, Position, TurnSnapshot
from oreminer.utils.errors import OutOfBoundsError


class OreGrid:
    """Per-cell ore counts plus an unknown flag for a fixed-size map.

    Unknown cells always store zero ore. Ore counts can go negative after
    speculative reservations; the next ``load_snapshot`` resets them.
    """

    def __init__(self, size: GridSize) -> None:
        self.size = size
        self._ore: List[int] = [0] * size.cells
        self._unknown: List[bool] = [True] * size.cells

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size.width and 0 <= y < self.size.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Cell ({x}, {y}) outside {self.size.width}x{self.size.height} grid."
            )
        return y * self.size.width + x

    def set_cell(self, x: int, y: int, ore: Optional[int], known: bool) -> None:
        idx = self._index(x, y)
        if not known or ore is None:
            self._ore[idx] = 0
            self._unknown[idx] = True
        else:
            self._ore[idx] = ore
            self._unknown[idx] = False

    def ore_at(self, x: int, y: int) -> int:
        return self._ore[self._index(x, y)]

    def is_unknown(self, x: int, y: int) -> bool:
        return self._unknown[self._index(x, y)]

    def reserve(self, x: int, y: int) -> int:
        """Claim one unit of ore for a robot this turn and return what is left."""

        idx = self._index(x, y)
        self._ore[idx] -= 1
        return self._ore[idx]

    def clear_ore(self, x: int, y: int) -> None:
        """Drop any ore at a cell nobody should dig (e.g. one holding a trap)."""

        self._ore[self._index(x, y)] = 0

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def total_ore(self) -> int:
        return sum(ore for ore in self._ore if ore > 0)

    def unknown_count(self) -> int:
        return sum(1 for flag in self._unknown if flag)

    def unknown_fraction(self) -> float:
        return self.unknown_count() / self.size.cells

    def center(self) -> Position:
        return Position(x=self.size.width // 2, y=self.size.height // 2)

    def clamp(self, x: int, y: int) -> Position:
        return Position(
            x=min(max(x, 0), self.size.width - 1),
            y=min(max(y, 0), self.size.height - 1),
        )

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def load_snapshot(self, snapshot: TurnSnapshot) -> None:
        """Replace every cell with the judge's view for this turn."""

        if len(snapshot.ore) != self.size.height:
            raise OutOfBoundsError(
                f"Snapshot has {len(snapshot.ore)} rows, expected {self.size.height}."
            )
        for y, row in enumerate(snapshot.ore):
            if len(row) != self.size.width:
                raise OutOfBoundsError(
                    f"Snapshot row {y} has {len(row)} cells, expected {self.size.width}."
                )
            for x, ore in enumerate(row):
                self.set_cell(x, y, ore, known=ore is not None)

    def copy(self) -> "OreGrid":
        clone = OreGrid(self.size)
        clone._ore = list(self._ore)
        clone._unknown = list(self._unknown)
        return clone
