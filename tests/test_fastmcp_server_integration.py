"""End-to-end coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json

import pytest
from fastmcp.client import Client

from linkedin_mcp_server.fastmcp_adapter import build_fastmcp_app


@pytest.mark.anyio()
async def test_fastmcp_server_supports_tool_discovery() -> None:
    """The FastMCP server exposes the LinkedIn toolset via the official protocol."""
    app, definitions = build_fastmcp_app()

    async with Client(app) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == {tool.name for tool in definitions}
    create_post = next(tool for tool in tools if tool.name == "create_post")
    assert create_post.inputSchema["required"] == ["text"]


@pytest.mark.anyio()
async def test_fastmcp_server_calls_tools() -> None:
    """Tool calls return the same JSON payload as the plain dispatcher."""
    app, _ = build_fastmcp_app()

    async with Client(app) as client:
        result = await client.call_tool(
            "search_organizations", {"query": "Acme", "limit": 100}
        )

    payload = json.loads(result.content[0].text)
    assert len(payload["data"]["elements"]) == 5
    assert result.structured_content == payload


@pytest.mark.anyio()
async def test_fastmcp_propagates_validation_errors() -> None:
    """Invalid arguments surface as tool errors through FastMCP client calls."""
    app, _ = build_fastmcp_app()

    async with Client(app) as client:
        result = await client.call_tool(
            "search_organizations", {"limit": 3}, raise_on_error=False
        )

    assert result.is_error is True
    assert "query" in result.content[0].text
