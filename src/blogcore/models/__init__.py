from __future__ import annotations

from blogcore.models.grid import GridOccupancy, GridPlacement
from blogcore.models.headings import MarkdownHeading
from blogcore.models.posts import Category, PostMetadata
from blogcore.models.tools import (
    ExtractHeadingsInput,
    ExtractHeadingsOutput,
    GridPlacementOutput,
    PackGridInput,
    PackGridOutput,
)

__all__ = [
    # headings
    "MarkdownHeading",
    # posts
    "Category",
    "PostMetadata",
    # grid
    "GridOccupancy",
    "GridPlacement",
    # tools
    "ExtractHeadingsInput",
    "ExtractHeadingsOutput",
    "PackGridInput",
    "PackGridOutput",
    "GridPlacementOutput",
]
