"""Tool handler for extract_headings.

Receives AppState, validates the request against the configured limits,
runs the heading extractor, and returns a structured dict.
No MCP or FastMCP imports — server.py handles the MCP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from blogcore.errors import BlogCoreError, ErrorCode
from blogcore.headings import count_lines, extract_headings, format_heading_map
from blogcore.models.tools import ExtractHeadingsInput, ExtractHeadingsOutput

if TYPE_CHECKING:
    from blogcore.state import AppState


async def handle(content: str, max_depth: int | None, state: AppState) -> dict:
    """Handle an extract_headings tool call."""
    log = structlog.get_logger().bind(tool="extract_headings")
    log.info("handler_called", content_length=len(content))

    # Validate input
    if max_depth is None:
        max_depth = state.settings.toc.max_depth
    try:
        validated = ExtractHeadingsInput(content=content, max_depth=max_depth)
    except ValueError as exc:
        raise BlogCoreError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Provide markdown content as a string and max_depth between 1 and 6.",
            recoverable=False,
        ) from exc

    max_bytes = state.settings.limits.max_content_bytes
    content_bytes = len(validated.content.encode("utf-8"))
    if content_bytes > max_bytes:
        raise BlogCoreError(
            code=ErrorCode.CONTENT_TOO_LARGE,
            message=f"Content is {content_bytes} bytes; the limit is {max_bytes} bytes.",
            suggestion="Split the document or raise limits.max_content_bytes.",
            recoverable=False,
        )

    headings = extract_headings(validated.content, max_depth=validated.max_depth)
    log.info("extract_complete", heading_count=len(headings), max_depth=validated.max_depth)

    output = ExtractHeadingsOutput(
        headings=headings,
        heading_map=format_heading_map(headings),
        total_lines=count_lines(validated.content),
    )
    return output.model_dump(mode="json")
