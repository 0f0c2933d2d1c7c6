"""linkedin_mcp package initialization."""

from linkedin_mcp.errors import MCPError
from linkedin_mcp.server import MCPServer, ToolFailure, ToolResult
from linkedin_mcp.tools import ToolDefinition, ToolParameters

__version__ = "1.0.0"

__all__ = [
    "MCPError",
    "MCPServer",
    "ToolDefinition",
    "ToolFailure",
    "ToolParameters",
    "ToolResult",
    "__version__",
]
