"""MCP server registry and JSON-RPC dispatcher.

The server owns the tool registry and turns decoded JSON-RPC requests into
response envelopes. It is free of transport details: HTTP and FastMCP front
ends live in :mod:`linkedin_mcp_server` and only call :meth:`MCPServer.dispatch`
or the registry accessors.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from linkedin_mcp.errors import MCPError
from linkedin_mcp.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    MCPRequest,
    attach_request_id,
    make_error_response,
    make_result_response,
)
from linkedin_mcp.tools import ToolDefinition

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("initialize", "tools/list", "tools/call")

DEFAULT_SERVER_INFO = {
    "name": "linkedin-mcp-server",
    "version": "1.0.0",
    "protocol": "MCP 1.0",
}


@dataclass
class ToolResult:
    """Result returned by a successful tool execution.

    Attributes:
        name: Name of the tool that produced the result.
        payload: Structured payload returned by the tool.

    """

    name: str
    payload: dict[str, Any]

    def to_json(self) -> str:
        """Serialize the payload as pretty-printed JSON.

        Returns:
            JSON text with two-space indentation.

        """
        return json.dumps(self.payload, indent=2, ensure_ascii=False)

    def to_content(self) -> list[dict[str, str]]:
        """Wrap the serialized payload as a single text content block."""
        return [{"type": "text", "text": self.to_json()}]


@dataclass
class ToolFailure:
    """Result returned when a tool could not produce a payload.

    Attributes:
        name: Name of the tool that failed.
        arguments: Arguments the tool was called with.
        message: Description of the failure.

    """

    name: str
    arguments: Any
    message: str


class MCPServer:
    """In-memory tool registry and JSON-RPC dispatcher.

    Tools are kept in registration order, which is also the order reported by
    ``tools/list`` and by :meth:`available_tools`.
    """

    def __init__(self, server_info: dict[str, str] | None = None) -> None:
        """Initialize an empty server registry."""
        self.server_info = dict(server_info or DEFAULT_SERVER_INFO)
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        logger.debug("Registered tool %s", tool.name)

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools in registration order."""
        return list(self._tools)

    def has_tool(self, name: object) -> bool:
        """Return whether ``name`` is a registered tool name."""
        return isinstance(name, str) and name in self._tools

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the descriptors of all registered tools."""
        return [tool.metadata() for tool in self._tools.values()]

    def to_catalog(self) -> dict[str, dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Mapping of tool names to their metadata.

        """
        return {name: tool.metadata() for name, tool in self._tools.items()}

    def run_tool(
        self, name: str, *, parameters: dict[str, Any] | None = None
    ) -> ToolResult:
        """Execute a registered tool.

        Args:
            name: Name of the registered tool to execute.
            parameters: Optional parameters for the tool.

        Raises:
            KeyError: If the tool name is not registered.
            MCPError: If parameter validation fails.

        Returns:
            ToolResult containing the tool name and structured payload.

        """
        if name not in self._tools:
            raise KeyError(f"Tool '{name}' is not registered")

        tool = self._tools[name]
        validated_params = tool.validate(parameters or {})
        payload = tool.handler(validated_params)
        return ToolResult(name=name, payload=payload)

    def execute_tool(
        self, name: str, arguments: Any = None
    ) -> ToolResult | ToolFailure:
        """Execute a registered tool, reporting failures as a value.

        Args:
            name: Name of the registered tool to execute.
            arguments: Raw arguments as sent by the caller.

        Returns:
            ToolResult on success, ToolFailure when validation or the handler
            raised.

        """
        try:
            return self.run_tool(name, parameters=arguments)
        except MCPError as error:
            logger.warning(
                "Tool %s rejected call (%s): %s", name, error.error_type, error.details
            )
            return ToolFailure(name=name, arguments=arguments, message=str(error))
        except Exception as exc:
            logger.warning("Tool %s raised", name, exc_info=True)
            return ToolFailure(name=name, arguments=arguments, message=str(exc))

    def dispatch(self, payload: object) -> dict[str, Any]:
        """Turn a decoded JSON-RPC request into a response envelope.

        Never raises: unknown methods, unknown tools and tool failures are all
        reported as JSON-RPC errors.

        Args:
            payload: Decoded request body.

        Returns:
            Response envelope carrying either ``result`` or ``error`` and the
            request ``id`` when one was sent.

        """
        request = MCPRequest.from_payload(payload)
        logger.debug("Dispatching method %r", request.method)
        handler = None
        if isinstance(request.method, str):
            handler = self._method_handlers().get(request.method)

        if handler is None:
            response = make_error_response(
                METHOD_NOT_FOUND,
                f"Method not found: {request.method}",
                {"supportedMethods": list(SUPPORTED_METHODS)},
            )
        else:
            response = handler(request.params)
        return attach_request_id(response, request)

    def handle_initialize(self, _params: dict[str, Any]) -> dict[str, Any]:
        """Describe the server and its capabilities."""
        return make_result_response(
            {
                "serverInfo": dict(self.server_info),
                "capabilities": {
                    "tools": {"listChanged": False},
                    "resources": {"subscribe": False, "listChanged": False},
                },
            }
        )

    def handle_tools_list(self, _params: dict[str, Any]) -> dict[str, Any]:
        """Return every registered tool descriptor."""
        return make_result_response({"tools": self.list_tools()})

    def handle_tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        """Invoke the tool named in ``params`` and wrap its output."""
        name = params.get("name")
        arguments = params.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}

        if not self.has_tool(name):
            return make_error_response(
                INVALID_PARAMS,
                f"Unknown tool: {name}",
                {"availableTools": self.available_tools()},
            )

        outcome = self.execute_tool(name, arguments)
        if isinstance(outcome, ToolFailure):
            return make_error_response(
                INTERNAL_ERROR,
                f"Internal error: {outcome.message}",
                {"tool": outcome.name, "arguments": outcome.arguments},
            )
        return make_result_response({"content": outcome.to_content()})

    def _method_handlers(
        self,
    ) -> dict[str, Callable[[dict[str, Any]], dict[str, Any]]]:
        return {
            "initialize": self.handle_initialize,
            "tools/list": self.handle_tools_list,
            "tools/call": self.handle_tools_call,
        }
