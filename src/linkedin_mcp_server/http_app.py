"""Plain JSON-RPC over HTTP front end for the dispatcher."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from linkedin_mcp.jsonrpc import INTERNAL_ERROR, make_error_response
from linkedin_mcp.server import MCPServer
from linkedin_mcp_server.config import ServerConfig
from linkedin_mcp_server.mock_data import iso_timestamp
from linkedin_mcp_server.tools import build_server

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, Accept",
    "Access-Control-Max-Age": "86400",
}


def create_app(server: MCPServer | None = None, path: str = "/mcp") -> Starlette:
    """Create a Starlette app that feeds POST bodies to ``server.dispatch``."""
    mcp_server = server or build_server()

    async def handle_mcp(request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        try:
            payload = await request.json()
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            logger.exception("Could not decode MCP request body")
            envelope = make_error_response(
                INTERNAL_ERROR,
                f"Internal error: {exc}",
                {"timestamp": iso_timestamp(datetime.now(timezone.utc))},
            )
            return JSONResponse(envelope, status_code=500, headers=CORS_HEADERS)

        return JSONResponse(mcp_server.dispatch(payload), headers=CORS_HEADERS)

    return Starlette(routes=[Route(path, handle_mcp, methods=["POST", "OPTIONS"])])


def serve(config: ServerConfig, server: MCPServer | None = None) -> None:
    """Serve the JSON-RPC endpoint with uvicorn until interrupted."""
    app = create_app(server, path=config.path)
    logger.info(
        "Serving JSON-RPC on http://%s:%s%s", config.host, config.port, config.path
    )
    uvicorn.run(
        app, host=config.host, port=config.port, log_level=config.log_level.lower()
    )
