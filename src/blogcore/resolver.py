"""Heading id resolution during rendering.

A renderer visits heading nodes one at a time and needs the same anchor ids
that the table of contents was built from. Line numbers are the primary key;
when a node carries no line (or one the extractor did not record, e.g. a
setext heading or a heading deeper than the ToC depth) the id is computed
from the node's text with the resolver's own slugger.
No knowledge of AppState, MCP, or I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from blogcore.headings import MAX_DEPTH_DEFAULT, HeadingSlugger, extract_headings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from blogcore.models.headings import MarkdownHeading


class HeadingIdResolver:
    """Resolve anchor ids for headings encountered while rendering one document."""

    def __init__(self, headings: Iterable[MarkdownHeading]) -> None:
        self._id_by_line: dict[int, str] = {h.line: h.id for h in headings}
        self._fallback = HeadingSlugger()

    @classmethod
    def from_content(cls, content: str, max_depth: int = MAX_DEPTH_DEFAULT) -> HeadingIdResolver:
        return cls(extract_headings(content, max_depth=max_depth))

    def resolve(self, text: str, line: int | None = None) -> str:
        if line is not None:
            mapped = self._id_by_line.get(line)
            if mapped:
                return mapped
        return self._fallback(text)
