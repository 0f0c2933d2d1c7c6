"""Tool definitions for the LinkedIn MCP server."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, ValidationError

from linkedin_mcp.errors import MCPError


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Unknown arguments are dropped rather than rejected; the advertised input
    schema is descriptive only.
    """

    model_config = ConfigDict(extra="ignore")


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to coerce input parameters.
        handler: Callable that executes the tool logic.
        input_schema: JSON-Schema-like object advertised by ``tools/list``.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: Callable[[Dict[str, Any]], Dict[str, Any]]
    input_schema: Dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []}
    )

    def validate(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and coerce incoming tool parameters.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            MCPError: If parameter validation fails.

        Returns:
            Validated parameter dictionary.
        """

        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            fields = ", ".join(
                ".".join(str(part) for part in detail["loc"]) or "arguments"
                for detail in error.errors()
            )
            raise MCPError(
                "InvalidParams",
                f"Invalid parameters for tool '{self.name}': {fields}",
                error.errors(include_url=False),
            ) from error
        return model.model_dump()

    def metadata(self) -> Dict[str, Any]:
        """Return the descriptor advertised by ``tools/list``."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }
