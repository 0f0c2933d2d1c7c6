"""Tool registration helpers for the LinkedIn MCP server."""

from __future__ import annotations

from linkedin_mcp.server import MCPServer
from linkedin_mcp.tools import ToolDefinition
from linkedin_mcp_server.tools.organizations import (
    get_organizations_tool,
    search_organizations_tool,
)
from linkedin_mcp_server.tools.posts import create_post_tool
from linkedin_mcp_server.tools.profile import get_profile_tool


def build_tools() -> list[ToolDefinition]:
    """Instantiate all tool definitions in advertised order."""
    return [
        get_profile_tool(),
        create_post_tool(),
        search_organizations_tool(),
        get_organizations_tool(),
    ]


def build_server() -> MCPServer:
    """Create a server with every LinkedIn demo tool registered."""
    server = MCPServer()
    server.register_tools(*build_tools())
    return server
