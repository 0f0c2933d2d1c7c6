"""CLI-level coverage for the server entry point."""

from __future__ import annotations

import pytest

from linkedin_mcp_server import main as server_main
from linkedin_mcp_server.config import ServerConfig


class _DummyApp:
    """Shim FastMCP app to capture run invocations without network I/O."""

    def __init__(self) -> None:
        self.run_calls: list[dict[str, object]] = []

    def run(self, *, transport: str, **kwargs: object) -> None:
        self.run_calls.append({"transport": transport, **kwargs})


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LINKEDIN_MCP_TRANSPORT",
        "LINKEDIN_MCP_HOST",
        "LINKEDIN_MCP_PORT",
        "LINKEDIN_MCP_PATH",
        "LINKEDIN_MCP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_main_runs_fastmcp_with_transport(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() delegates to FastMCP.run with the provided transport settings."""
    dummy_app = _DummyApp()
    monkeypatch.setattr(server_main, "build_fastmcp_app", lambda: (dummy_app, []))

    exit_code = server_main.main(
        [
            "--transport",
            "http",
            "--host",
            "127.0.0.1",
            "--port",
            "8080",
            "--path",
            "/mcp",
        ]
    )

    assert exit_code == 0
    assert dummy_app.run_calls == [
        {"transport": "http", "host": "127.0.0.1", "port": 8080, "path": "/mcp"}
    ]


def test_main_runs_fastmcp_over_stdio(monkeypatch: pytest.MonkeyPatch) -> None:
    """stdio takes no bind settings."""
    dummy_app = _DummyApp()
    monkeypatch.setattr(server_main, "build_fastmcp_app", lambda: (dummy_app, []))

    assert server_main.main(["--transport", "stdio"]) == 0
    assert dummy_app.run_calls == [{"transport": "stdio"}]


def test_main_defaults_to_jsonrpc_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Without flags the environment picks the plain JSON-RPC endpoint."""
    served: list[ServerConfig] = []
    monkeypatch.setattr(server_main.http_app, "serve", served.append)
    monkeypatch.setenv("LINKEDIN_MCP_PORT", "8123")
    monkeypatch.setenv("LINKEDIN_MCP_PATH", "/rpc")

    exit_code = server_main.main([])

    assert exit_code == 0
    assert served == [
        ServerConfig(
            transport="jsonrpc",
            host="127.0.0.1",
            port=8123,
            path="/rpc",
            log_level="INFO",
        )
    ]
