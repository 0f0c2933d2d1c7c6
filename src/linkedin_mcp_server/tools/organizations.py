"""Organization search and membership tools."""

from __future__ import annotations

from typing import Any

from linkedin_mcp.tools import ToolDefinition, ToolParameters
from linkedin_mcp_server import mock_data

DEFAULT_SEARCH_LIMIT = 10


class SearchOrganizationsParams(ToolParameters):
    """Parameters for search_organizations."""

    query: str
    limit: float | None = None


class GetOrganizationsParams(ToolParameters):
    """Parameters for get_organizations."""

    role: Any = None


def search_organizations_tool() -> ToolDefinition:
    """Create the search_organizations tool definition."""

    def handler(params: dict[str, Any]) -> dict[str, object]:
        # The advertised 1-50 range is not enforced; results stop at five.
        limit = params["limit"] or DEFAULT_SEARCH_LIMIT
        elements = [
            organization.to_dict()
            for organization in mock_data.search_organizations(params["query"], limit)
        ]
        return {
            "status": "demo",
            "message": "Demo search results. Connect LinkedIn API for real data.",
            "data": {
                "elements": elements,
                "paging": {
                    "total": len(elements),
                    "count": len(elements),
                    "start": 0,
                },
            },
        }

    return ToolDefinition(
        name="search_organizations",
        description="Search for LinkedIn organizations",
        parameters_model=SearchOrganizationsParams,
        handler=handler,
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query for organizations",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of results to return",
                    "default": DEFAULT_SEARCH_LIMIT,
                    "minimum": 1,
                    "maximum": 50,
                },
            },
            "required": ["query"],
        },
    )


def get_organizations_tool() -> ToolDefinition:
    """Create the get_organizations tool definition."""

    def handler(params: dict[str, Any]) -> dict[str, object]:
        memberships = mock_data.memberships_for_role(params["role"])
        return {
            "status": "demo",
            "message": "Demo organization data. Connect LinkedIn API for real data.",
            "data": {"elements": [membership.to_dict() for membership in memberships]},
        }

    return ToolDefinition(
        name="get_organizations",
        description="Get organizations the user has access to",
        parameters_model=GetOrganizationsParams,
        handler=handler,
        input_schema={
            "type": "object",
            "properties": {
                "role": {
                    "type": "string",
                    "description": "Filter by role (ADMINISTRATOR, MEMBER, etc.)",
                    "enum": ["ADMINISTRATOR", "MEMBER", "CONTRIBUTOR"],
                },
            },
            "required": [],
        },
    )
