"""MCP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState via the FastMCP lifespan context manager
- Register tools
- Run the stdio transport
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import structlog
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult, TextContent

import blogcore.tools.extract_headings as t_extract
import blogcore.tools.pack_grid as t_pack
from blogcore import __version__
from blogcore.config import Settings
from blogcore.errors import BlogCoreError
from blogcore.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr — stdout is reserved for the MCP JSON-RPC stream
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncGenerator[AppState, None]:
    """Create and tear down shared state for the server's lifetime."""
    settings = Settings()
    _setup_logging(settings)

    state = AppState(settings=settings)
    log.info(
        "server_started",
        version=__version__,
        toc_max_depth=settings.toc.max_depth,
        grid_columns=settings.grid.columns,
    )

    try:
        yield state
    finally:
        log.info("server_stopping")


# ---------------------------------------------------------------------------
# FastMCP instance and tool registration
# ---------------------------------------------------------------------------

mcp = FastMCP("blogcore", lifespan=lifespan)
# FastMCP doesn't expose a version kwarg — set it on the underlying Server
# so the MCP initialize handshake reports our version, not the SDK's.
mcp._mcp_server.version = __version__  # pyright: ignore[reportPrivateUsage]


def _serialise_tool_error(error: BlogCoreError) -> CallToolResult:
    """Convert a BlogCoreError to the MCP tool error result envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(error.to_dict()))],
        isError=True,
    )


def _log_tool_error(tool: str, exc: BlogCoreError) -> None:
    log.warning(
        "tool_error",
        tool=tool,
        code=exc.code,
        message=exc.message,
        recoverable=exc.recoverable,
    )


@mcp.tool()
async def extract_headings(content: str, ctx: Context, max_depth: int | None = None) -> object:
    """Extract the table of contents of a markdown document.

    Returns every ATX heading up to max_depth (default from config, usually 3)
    with a unique anchor id, display text, level and 1-based line number.
    Headings inside fenced code blocks are ignored.
    """
    state: AppState = ctx.request_context.lifespan_context
    try:
        return await t_extract.handle(content, max_depth, state)
    except BlogCoreError as exc:
        _log_tool_error("extract_headings", exc)
        return _serialise_tool_error(exc)
    except Exception:
        log.error("tool_unexpected_error", tool="extract_headings", exc_info=True)
        raise


@mcp.tool()
async def pack_grid(
    items: list[dict[str, Any]],
    ctx: Context,
    columns: int | None = None,
    auto_size: bool = True,
) -> object:
    """Lay out blog posts in a fixed-column grid.

    Each post occupies a square of gridSize cells (1, 2 or 3). Posts are
    placed in order at the first free top-left position. With auto_size,
    posts get size 1 unless at least one post already declares a size.
    """
    state: AppState = ctx.request_context.lifespan_context
    try:
        return await t_pack.handle(items, columns, auto_size, state)
    except BlogCoreError as exc:
        _log_tool_error("pack_grid", exc)
        return _serialise_tool_error(exc)
    except Exception:
        log.error("tool_unexpected_error", tool="pack_grid", exc_info=True)
        raise


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
