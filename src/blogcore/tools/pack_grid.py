"""Tool handler for pack_grid.

Receives AppState, optionally applies default grid sizes, packs the posts
into the grid, and returns a structured dict.
No MCP or FastMCP imports — server.py handles the MCP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from blogcore.errors import BlogCoreError, ErrorCode
from blogcore.grid import assign_grid_sizes, pack_grid
from blogcore.models.tools import GridPlacementOutput, PackGridInput, PackGridOutput

if TYPE_CHECKING:
    from blogcore.state import AppState


async def handle(
    items: list[dict[str, Any]],
    columns: int | None,
    auto_size: bool,
    state: AppState,
) -> dict:
    """Handle a pack_grid tool call."""
    log = structlog.get_logger().bind(tool="pack_grid")
    log.info("handler_called", item_count=len(items))

    # Validate input
    if columns is None:
        columns = state.settings.grid.columns
    try:
        validated = PackGridInput(items=items, columns=columns, auto_size=auto_size)
    except ValueError as exc:
        raise BlogCoreError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Provide a list of posts (each with a slug) and columns >= 1.",
            recoverable=False,
        ) from exc

    max_items = state.settings.limits.max_grid_items
    if len(validated.items) > max_items:
        raise BlogCoreError(
            code=ErrorCode.INVALID_INPUT,
            message=f"Got {len(validated.items)} items; the limit is {max_items}.",
            suggestion="Paginate the listing and pack one page at a time.",
            recoverable=False,
        )

    posts = assign_grid_sizes(validated.items) if validated.auto_size else validated.items
    placements = pack_grid(posts, columns=validated.columns)
    rows = max((p.row + p.size for p in placements), default=0)
    log.info("grid_packed", item_count=len(placements), columns=validated.columns, rows=rows)

    output = PackGridOutput(
        columns=validated.columns,
        rows=rows,
        placements=[
            GridPlacementOutput(
                item=p.item.model_dump(mode="json"),
                size=p.size,
                row=p.row,
                col=p.col,
            )
            for p in placements
        ],
    )
    return output.model_dump(mode="json")
