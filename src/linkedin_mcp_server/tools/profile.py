"""Tool returning the demo member profile."""

from __future__ import annotations

from linkedin_mcp.tools import ToolDefinition, ToolParameters
from linkedin_mcp_server.mock_data import DEMO_PROFILE


class GetProfileParams(ToolParameters):
    """Parameters for get_profile (none)."""


def get_profile_tool() -> ToolDefinition:
    """Create the get_profile tool definition."""

    def handler(_: dict[str, object]) -> dict[str, object]:
        return {
            "status": "demo",
            "message": (
                "This is a demo response. Connect your LinkedIn app for real data."
            ),
            "data": DEMO_PROFILE.to_dict(),
        }

    return ToolDefinition(
        name="get_profile",
        description="Get LinkedIn profile information for the current user",
        parameters_model=GetProfileParams,
        handler=handler,
        input_schema={"type": "object", "properties": {}, "required": []},
    )
