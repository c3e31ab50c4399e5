from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from blogcore.models.headings import MarkdownHeading  # noqa: TC001
from blogcore.models.posts import PostMetadata  # noqa: TC001

# ---------------------------------------------------------------------------
# extract_headings
# ---------------------------------------------------------------------------


class ExtractHeadingsInput(BaseModel):
    content: str
    max_depth: int = Field(ge=1, le=6)


class ExtractHeadingsOutput(BaseModel):
    headings: list[MarkdownHeading]
    heading_map: str  # Plain-text map: "<line>: <hashes> <text>\n..."
    total_lines: int


# ---------------------------------------------------------------------------
# pack_grid
# ---------------------------------------------------------------------------


class PackGridInput(BaseModel):
    items: list[PostMetadata]
    columns: int = Field(ge=1)
    auto_size: bool = True


class GridPlacementOutput(BaseModel):
    item: dict[str, Any]
    size: int
    row: int
    col: int


class PackGridOutput(BaseModel):
    columns: int
    rows: int  # Grid height after packing
    placements: list[GridPlacementOutput]
