"""Error types for MCP tools.

Raised inside tool handlers and turned into ``{"error", "details"}``
responses by the server; they never escape a tool call.
"""

from typing import Any


class ToolError(Exception):
    """Base class for tool execution errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(ToolError):
    """Input validation failed."""

    def __init__(self, field: str, message: str):
        super().__init__(
            f"Validation error for '{field}': {message}",
            {"field": field},
        )


class ServiceNotConfiguredError(ToolError):
    """A tool needs the image API but no key has been configured."""

    def __init__(self, tool: str):
        super().__init__(
            f"Image generation is not configured. Call configure-api with your API key "
            f"before using {tool}, or set AIPIC_API_KEY when starting the server.",
            {"tool": tool},
        )
