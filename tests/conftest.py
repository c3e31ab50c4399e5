"""Shared test fixtures for the blogcore test suite."""

from __future__ import annotations

import pytest

from blogcore.models.posts import PostMetadata


@pytest.fixture()
def sample_document() -> str:
    """A post body with a fenced block, duplicate headings and a deep heading."""
    return (
        "# Building a Blog\n"  # line 1
        "\n"  # line 2
        "## Setup\n"  # line 3
        "\n"  # line 4
        "```bash\n"  # line 5
        "## not a heading\n"  # line 6
        "```\n"  # line 7
        "\n"  # line 8
        "### Install [Node](https://nodejs.org)\n"  # line 9
        "#### Too deep\n"  # line 10
        "## Setup\n"  # line 11
        "## ???\n"  # line 12
    )


@pytest.fixture()
def sample_posts() -> list[PostMetadata]:
    """Listing metadata for a handful of posts, none with a grid size."""
    return [
        PostMetadata(
            slug="hello-world",
            title="Hello World",
            date="2024-05-01",
            tags=["meta"],
            category="life",
            reading_time="2 min read",
        ),
        PostMetadata(
            slug="weekly-review",
            title="My Weekly Review",
            date="2024-04-20",
            tags=["habits"],
            category="productivity",
            reading_time="5 min read",
        ),
        PostMetadata(
            slug="grid-layout",
            title="Packing a Post Grid",
            date="2024-04-02",
            tags=["css", "algorithms"],
            category="projects",
            project="blog",
            reading_time="7 min read",
        ),
    ]
