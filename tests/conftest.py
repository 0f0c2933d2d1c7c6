"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from linkedin_mcp.server import MCPServer
from linkedin_mcp_server.tools import build_server


@pytest.fixture()
def server() -> MCPServer:
    """Provide a server with every demo tool registered."""
    return build_server()


@pytest.fixture()
def fixed_now() -> datetime:
    """A fixed, timezone-aware creation time for post tests."""
    return datetime(2024, 5, 17, 9, 30, 15, 123000, tzinfo=timezone.utc)


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio only; FastMCP's client requires it."""
    return "asyncio"
