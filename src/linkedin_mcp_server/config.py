"""Runtime configuration for the server entry point."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

TRANSPORTS = ("jsonrpc", "stdio", "http", "sse")


@dataclass
class ServerConfig:
    """Transport selection, bind address and log level for the entry point."""

    transport: str = "jsonrpc"
    host: str = "127.0.0.1"
    port: int = 8000
    path: str = "/mcp"
    log_level: str = "INFO"


def _parse_port(raw: str) -> int:
    """Parse a TCP port, rejecting non-integers and values outside 1-65535."""
    try:
        port = int(raw.strip())
    except ValueError as error:
        raise ValueError(f"Invalid port: {raw!r}") from error
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def load_config_from_env(environ: Mapping[str, str] | None = None) -> ServerConfig:
    """Read ``LINKEDIN_MCP_*`` variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    defaults = ServerConfig()
    transport = env.get("LINKEDIN_MCP_TRANSPORT", defaults.transport).strip().lower()
    if transport not in TRANSPORTS:
        raise ValueError(f"Unsupported transport: {transport!r}")
    return ServerConfig(
        transport=transport,
        host=env.get("LINKEDIN_MCP_HOST", defaults.host).strip(),
        port=_parse_port(env.get("LINKEDIN_MCP_PORT", str(defaults.port))),
        path=env.get("LINKEDIN_MCP_PATH", defaults.path).strip(),
        log_level=env.get("LINKEDIN_MCP_LOG_LEVEL", defaults.log_level).strip().upper(),
    )
