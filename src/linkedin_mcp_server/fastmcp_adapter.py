"""Adapters for exposing the LinkedIn demo tools via FastMCP."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult

from linkedin_mcp.tools import ToolDefinition
from linkedin_mcp_server.tools import build_tools


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition) -> None:
        """Create a FastMCP tool wrapper for the provided definition."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema,
            tags=set(),
        )
        self._definition = definition

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Validate arguments and delegate to the wrapped handler."""
        validated_arguments = self._definition.validate(arguments)
        payload = self._definition.handler(validated_arguments)
        return ToolResult(
            content=json.dumps(payload, indent=2, ensure_ascii=False),
            structured_content=payload,
        )


def to_fastmcp_tools(tool_definitions: Sequence[ToolDefinition]) -> list[Tool]:
    """Convert tool definitions into FastMCP-compatible tools."""
    return [ToolDefinitionAdapter(definition) for definition in tool_definitions]


def build_fastmcp_app() -> tuple[FastMCP, list[ToolDefinition]]:
    """Create a FastMCP server instance with all LinkedIn demo tools registered."""
    app = FastMCP(
        name="linkedin-mcp-server",
        instructions="Mock LinkedIn operations over the Model Context Protocol.",
    )
    tool_definitions = build_tools()
    for tool in to_fastmcp_tools(tool_definitions):
        app.add_tool(tool)
    return app, tool_definitions
