"""Environment-driven configuration."""

from __future__ import annotations

import pytest

from linkedin_mcp_server.config import ServerConfig, load_config_from_env


def test_defaults_when_environment_is_empty() -> None:
    """Missing variables fall back to the dataclass defaults."""
    assert load_config_from_env({}) == ServerConfig()


def test_reads_environment_variables() -> None:
    """Every LINKEDIN_MCP_* variable is honored."""
    config = load_config_from_env(
        {
            "LINKEDIN_MCP_TRANSPORT": "HTTP",
            "LINKEDIN_MCP_HOST": " 0.0.0.0 ",
            "LINKEDIN_MCP_PORT": "9000",
            "LINKEDIN_MCP_PATH": "/rpc",
            "LINKEDIN_MCP_LOG_LEVEL": "debug",
        }
    )

    assert config == ServerConfig(
        transport="http", host="0.0.0.0", port=9000, path="/rpc", log_level="DEBUG"
    )


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_rejects_invalid_ports(port: str) -> None:
    """Ports must be integers in the TCP range."""
    with pytest.raises(ValueError):
        load_config_from_env({"LINKEDIN_MCP_PORT": port})


def test_rejects_unknown_transport() -> None:
    """Only the supported transports are accepted."""
    with pytest.raises(ValueError, match="websocket"):
        load_config_from_env({"LINKEDIN_MCP_TRANSPORT": "websocket"})
