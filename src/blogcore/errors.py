from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    CONTENT_TOO_LARGE = "CONTENT_TOO_LARGE"
    INVALID_GRID_SIZE = "INVALID_GRID_SIZE"


class BlogCoreError(Exception):
    """Raised for all expected failure conditions.

    Tool handlers let it propagate; server.py catches it and serialises it
    into the MCP error response so the caller receives a structured error
    with a suggestion.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }
