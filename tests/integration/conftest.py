"""Integration test fixtures.

Provides an AppState wired with default settings and a baseline environment
for subprocess-based MCP tests.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from blogcore.config import Settings
from blogcore.state import AppState

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Baseline env dict for subprocess-based MCP integration tests.

    Pins the settings that tests assert on so a local blogcore.yaml or
    BLOGCORE__* variables cannot leak in.
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("BLOGCORE__")}
    env["BLOGCORE__TOC__MAX_DEPTH"] = "3"
    env["BLOGCORE__GRID__COLUMNS"] = "3"
    env["BLOGCORE__LOGGING__LEVEL"] = "WARNING"
    return env


@pytest.fixture()
def app_state() -> AppState:
    """AppState with default settings and small limits."""
    settings = Settings(limits={"max_content_bytes": 4096, "max_grid_items": 10})
    return AppState(settings=settings)
