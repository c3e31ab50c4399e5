"""Grid layout for the post listing.

Greedy first-fit packing of square items (1, 2 or 3 cells wide) into a
fixed-column grid, scanning top-to-bottom and left-to-right. Items are
placed strictly in input order, so the listing order survives packing.

Items may be mappings (``grid_size`` or ``gridSize`` key) or objects with a
``grid_size`` attribute such as ``PostMetadata``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import structlog
from pydantic import BaseModel

from blogcore.errors import BlogCoreError, ErrorCode
from blogcore.models.grid import GridOccupancy, GridPlacement

if TYPE_CHECKING:
    from collections.abc import Sequence

log = structlog.get_logger()

T = TypeVar("T")

DEFAULT_COLUMNS = 3
DEFAULT_GRID_SIZE = 1

_SIZE_KEYS = ("grid_size", "gridSize")


def declared_size(item: Any) -> int | None:
    """Return the size an item declares, or None if it declares none."""
    if isinstance(item, Mapping):
        for key in _SIZE_KEYS:
            if item.get(key) is not None:
                return item[key]
        return None
    return getattr(item, "grid_size", None)


def _with_size(item: T, size: int) -> T:
    if isinstance(item, Mapping):
        return {**item, "grid_size": size}  # type: ignore[return-value]
    if isinstance(item, BaseModel):
        return item.model_copy(update={"grid_size": size})
    sized = copy.copy(item)
    sized.grid_size = size  # type: ignore[attr-defined]
    return sized


def assign_grid_sizes(items: Sequence[T]) -> list[T]:
    """Give every item the default 1x1 size unless the caller chose sizes.

    All-or-nothing: if any item already declares a size, every item is
    returned exactly as supplied.
    """
    if not items:
        return []

    if any(declared_size(item) is not None for item in items):
        return list(items)

    return [_with_size(item, DEFAULT_GRID_SIZE) for item in items]


def pack_grid(items: Sequence[T], columns: int = DEFAULT_COLUMNS) -> list[GridPlacement[T]]:
    """Assign a top-left (row, col) cell to every item.

    Raises BlogCoreError when ``columns`` < 1 or an item's size can never
    fit (< 1 or wider than the grid); either would otherwise search forever.
    """
    if columns < 1:
        raise BlogCoreError(
            code=ErrorCode.INVALID_INPUT,
            message=f"columns must be at least 1, got {columns}",
            suggestion="Pass a positive column count.",
        )

    sizes = [declared_size(item) or DEFAULT_GRID_SIZE for item in items]
    for index, size in enumerate(sizes):
        if not 1 <= size <= columns:
            raise BlogCoreError(
                code=ErrorCode.INVALID_GRID_SIZE,
                message=f"Item {index} has grid size {size}, which cannot fit in {columns} columns",
                suggestion=f"Use a grid size between 1 and {columns}.",
            )

    occupancy = GridOccupancy(columns=columns)
    placements: list[GridPlacement[T]] = []

    for item, size in zip(items, sizes, strict=True):
        row = 0
        placed: GridPlacement[T] | None = None
        while placed is None:
            for col in range(columns):
                if occupancy.is_free(row, col, size):
                    occupancy.occupy(row, col, size)
                    placed = GridPlacement(item=item, size=size, row=row, col=col)
                    break
            else:
                row += 1
        placements.append(placed)

    log.debug("grid_packed", items=len(placements), columns=columns, rows=occupancy.height)
    return placements
