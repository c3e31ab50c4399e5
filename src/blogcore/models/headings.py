from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MarkdownHeading(BaseModel):
    """Single ATX heading extracted from a markdown document."""

    model_config = ConfigDict(frozen=True)

    id: str  # Unique within one document
    text: str  # Display text: links collapsed, emphasis markers removed
    level: int  # 1–6
    line: int  # 1-based source line
