"""Entry point for the LinkedIn MCP demo server."""

from __future__ import annotations

import argparse
import logging

from linkedin_mcp_server import http_app
from linkedin_mcp_server.config import TRANSPORTS, ServerConfig, load_config_from_env
from linkedin_mcp_server.fastmcp_adapter import build_fastmcp_app

logger = logging.getLogger(__name__)


def build_parser(defaults: ServerConfig) -> argparse.ArgumentParser:
    """Create the argument parser, seeded with environment defaults."""
    parser = argparse.ArgumentParser(description="LinkedIn MCP demo server")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default=defaults.transport,
        help="jsonrpc serves the plain dispatcher; the others run FastMCP.",
    )
    parser.add_argument("--host", default=defaults.host)
    parser.add_argument("--port", type=int, default=defaults.port)
    parser.add_argument("--path", default=defaults.path)
    parser.add_argument("--log-level", default=defaults.log_level)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected transport."""
    args = build_parser(load_config_from_env()).parse_args(argv)
    config = ServerConfig(
        transport=args.transport,
        host=args.host,
        port=args.port,
        path=args.path,
        log_level=args.log_level.upper(),
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if config.transport == "jsonrpc":
        http_app.serve(config)
        return 0

    app, tool_definitions = build_fastmcp_app()
    logger.info(
        "Starting FastMCP (%s) with %d tools", config.transport, len(tool_definitions)
    )
    if config.transport == "stdio":
        app.run(transport="stdio")
    else:
        app.run(
            transport=config.transport,
            host=config.host,
            port=config.port,
            path=config.path,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
