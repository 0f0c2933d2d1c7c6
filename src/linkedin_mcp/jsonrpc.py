"""JSON-RPC 2.0 envelope helpers used by the dispatcher and transports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


@dataclass
class MCPRequest:
    """Decoded request envelope.

    Attributes:
        method: Requested method. Left as sent by the caller, so it may not be a
            string at all.
        params: Method parameters; anything other than an object becomes empty.
        request_id: Correlation id echoed on the response.
        has_id: Whether the caller sent an ``id`` key, even a falsy one.

    """

    method: Any = None
    params: dict[str, Any] = field(default_factory=dict)
    request_id: Any = None
    has_id: bool = False

    @classmethod
    def from_payload(cls, payload: object) -> MCPRequest:
        """Build a request from a decoded JSON body without validating it."""
        if not isinstance(payload, dict):
            return cls()
        params = payload.get("params")
        return cls(
            method=payload.get("method"),
            params=params if isinstance(params, dict) else {},
            request_id=payload.get("id"),
            has_id="id" in payload,
        )


def make_result_response(result: dict[str, Any]) -> dict[str, Any]:
    """Wrap a successful result in a response envelope."""
    return {"jsonrpc": JSONRPC_VERSION, "result": result}


def make_error_response(
    code: int, message: str, data: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Wrap an error in a response envelope."""
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "error": error}


def attach_request_id(
    response: dict[str, Any], request: MCPRequest
) -> dict[str, Any]:
    """Copy the request id onto the response when the caller sent one."""
    if request.has_id:
        response["id"] = request.request_id
    return response
