"""Heading extractor for markdown documents.

Single-pass algorithm that extracts ATX headings up to a configurable depth,
suppressing headings inside fenced code blocks, and assigns each one a
collision-safe anchor id. Ids come from a ``HeadingSlugger``, so a renderer
that slugs the same heading texts one at a time with a fresh slugger arrives
at the same ids as a full-document extraction.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from blogcore.models.headings import MarkdownHeading

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

MAX_DEPTH_DEFAULT = 3

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_FENCE_RE = re.compile(r"^(`{3,}|~{3,})")
_HEADING_RE = re.compile(r"^\s{0,3}(#{1,6})\s+([^\r\n]+)$")
_LINK_RE = re.compile(r"\[(.*?)\]\(.*?\)")
_EMPHASIS_RE = re.compile(r"[*_`]")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def split_lines(content: str) -> list[str]:
    """Split on ``\\n`` or ``\\r\\n`` only; a lone ``\\r`` stays inside its line."""
    return _LINE_SPLIT_RE.split(content)


def count_lines(content: str) -> int:
    """Number of source lines, not counting the empty tail after a final newline."""
    lines = split_lines(content)
    if lines[-1] == "":
        lines.pop()
    return len(lines)


def sanitize_heading_text(text: str) -> str:
    """Collapse ``[label](url)`` to ``label`` and drop emphasis markers."""
    text = _LINK_RE.sub(r"\1", text)
    text = _EMPHASIS_RE.sub("", text)
    return text.strip()


def slug_base(text: str) -> str:
    """Derive the un-suffixed slug for a heading text.

    Returns an empty string when nothing alphanumeric survives.
    """
    slug = text.lower()
    slug = _LINK_RE.sub(r"\1", slug)
    slug = _EMPHASIS_RE.sub("", slug)
    slug = _NON_SLUG_RE.sub("-", slug)
    return slug.strip("-")


class HeadingSlugger:
    """Assigns unique heading ids within one document.

    Each call consumes one fallback index, whether or not the fallback is
    used, so the n-th call always corresponds to the n-th retained heading.
    """

    def __init__(self) -> None:
        # slug base → next repetition suffix to try
        self._counts: dict[str, int] = {}
        self._issued: set[str] = set()
        self._fallback_index = 0

    def __call__(self, text: str) -> str:
        base = slug_base(text)
        if not base:
            base = f"heading-{self._fallback_index}"
        self._fallback_index += 1

        count = self._counts.get(base, 0)
        slug = base if count == 0 else f"{base}-{count}"
        # "Notes", "Notes-1", "Notes" would otherwise issue "notes-1" twice
        while slug in self._issued:
            count += 1
            slug = f"{base}-{count}"
        self._counts[base] = count + 1
        self._issued.add(slug)
        return slug


def create_heading_slugger() -> Callable[[str], str]:
    """Return a fresh slugger for incremental, one-heading-at-a-time use."""
    return HeadingSlugger()


def extract_headings(content: str, max_depth: int = MAX_DEPTH_DEFAULT) -> list[MarkdownHeading]:
    """Extract heading records from markdown content.

    Headings deeper than ``max_depth`` are dropped. An unterminated fence
    swallows the rest of the document; that is not an error.
    """
    headings: list[MarkdownHeading] = []
    slugger = HeadingSlugger()

    in_fence = False
    fence_char: str | None = None
    fence_length = 0

    for lineno, line in enumerate(split_lines(content), start=1):
        # Rule 1: code fence tracking
        fence_match = _FENCE_RE.match(line.lstrip())
        if fence_match:
            run = fence_match.group(1)
            if not in_fence:
                in_fence = True
                fence_char = run[0]
                fence_length = len(run)
            elif run[0] == fence_char and len(run) >= fence_length:
                in_fence = False
                fence_char = None
                fence_length = 0
            continue

        if in_fence:
            continue

        # Rule 2: ATX heading detection
        match = _HEADING_RE.match(line)
        if not match:
            continue

        level = len(match.group(1))
        if level > max_depth:
            continue

        raw_text = match.group(2).strip()
        headings.append(
            MarkdownHeading(
                id=slugger(raw_text),
                text=sanitize_heading_text(raw_text),
                level=level,
                line=lineno,
            )
        )

    return headings


def format_heading_map(headings: Iterable[MarkdownHeading]) -> str:
    """Render headings as a plain-text map, one ``"<line>: ## <text>"`` per line.

    Returns an empty string if there are no headings.
    """
    return "\n".join(f"{h.line}: {'#' * h.level} {h.text}" for h in headings)
