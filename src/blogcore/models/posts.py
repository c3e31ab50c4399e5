from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Category = Literal["projects", "productivity", "life"]


class PostMetadata(BaseModel):
    """Listing metadata for one blog post, as read from its frontmatter.

    Frontmatter keys are camelCase (``coverImage``, ``gridSize``); both the
    camelCase alias and the snake_case field name are accepted.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    slug: str
    title: str = ""
    excerpt: str = ""
    cover_image: str = ""
    date: str = ""
    tags: list[str] = []
    category: Category | None = None
    project: str | None = None  # Only set for posts in the "projects" category
    reading_time: str = ""
    published: bool = True
    grid_size: int | None = None  # Square footprint in grid cells; None = unset
