"""Tool simulating post creation."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from linkedin_mcp.tools import ToolDefinition, ToolParameters
from linkedin_mcp_server.mock_data import Post

DEFAULT_VISIBILITY = "PUBLIC"


class CreatePostParams(ToolParameters):
    """Parameters for create_post.

    ``text`` is advertised as a required string but taken as sent, missing
    included.
    """

    text: Any = None
    visibility: Any = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_post_tool(clock: Callable[[], datetime] = _utcnow) -> ToolDefinition:
    """Create the create_post tool definition.

    Args:
        clock: Source of the creation time, which also seeds the post id.

    """

    def handler(params: dict[str, Any]) -> dict[str, object]:
        # Empty or null visibility falls back to the default, like a missing one.
        visibility = params["visibility"] or DEFAULT_VISIBILITY
        post = Post.create(params["text"], visibility, now=clock())
        return {
            "status": "success",
            "message": f"Post would be created with visibility: {visibility}",
            "data": post.to_dict(),
        }

    return ToolDefinition(
        name="create_post",
        description="Create a new LinkedIn post",
        parameters_model=CreatePostParams,
        handler=handler,
        input_schema={
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": "The text content of the post",
                },
                "visibility": {
                    "type": "string",
                    "description": "Post visibility (PUBLIC or CONNECTIONS)",
                    "enum": ["PUBLIC", "CONNECTIONS"],
                    "default": DEFAULT_VISIBILITY,
                },
            },
            "required": ["text"],
        },
    )
