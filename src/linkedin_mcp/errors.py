"""Custom error types for MCP tooling."""

from __future__ import annotations


class MCPError(Exception):
    """Tool error carrying a category and JSON-friendly details.

    Raised for failures the caller caused, such as arguments that cannot be
    coerced into a tool's parameter model.
    """

    def __init__(
        self, error_type: str, message: str, details: object | None = None
    ) -> None:
        """Create a categorized MCP error."""
        super().__init__(message)
        self.error_type = error_type
        self.details = details
