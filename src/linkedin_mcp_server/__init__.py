"""Model Context Protocol demo server with mock LinkedIn tools."""

from linkedin_mcp.errors import MCPError
from linkedin_mcp.tools import ToolDefinition, ToolParameters
from linkedin_mcp_server.config import ServerConfig, load_config_from_env
from linkedin_mcp_server.tools import build_server, build_tools

__all__ = [
    "MCPError",
    "ServerConfig",
    "ToolDefinition",
    "ToolParameters",
    "build_server",
    "build_tools",
    "load_config_from_env",
]
