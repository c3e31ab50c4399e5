from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GridPlacement(Generic[T]):
    """An item together with the top-left cell it was packed into."""

    item: T
    size: int
    row: int
    col: int

    def cells(self) -> list[tuple[int, int]]:
        """Every (row, col) cell covered by this placement."""
        return [
            (r, c)
            for r in range(self.row, self.row + self.size)
            for c in range(self.col, self.col + self.size)
        ]


@dataclass
class GridOccupancy:
    """Sparse occupancy map for one packing call.

    Rows are created on first write; a missing row is entirely free.
    """

    columns: int

    # row index → one flag per column
    rows: dict[int, list[bool]] = field(default_factory=dict)

    def is_free(self, row: int, col: int, size: int) -> bool:
        if col + size > self.columns:
            return False
        for r in range(row, row + size):
            cells = self.rows.get(r)
            if cells is None:
                continue
            if any(cells[col : col + size]):
                return False
        return True

    def occupy(self, row: int, col: int, size: int) -> None:
        for r in range(row, row + size):
            cells = self.rows.setdefault(r, [False] * self.columns)
            for c in range(col, col + size):
                cells[c] = True

    @property
    def height(self) -> int:
        """Number of rows touched so far (0 for an empty grid)."""
        return max(self.rows) + 1 if self.rows else 0
