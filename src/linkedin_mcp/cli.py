"""Command-line interface for the LinkedIn MCP dispatcher."""

from __future__ import annotations

import argparse
import json

from linkedin_mcp_server.tools import build_server


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Query the LinkedIn MCP demo tools.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON.",
    )
    parser.add_argument(
        "--request",
        metavar="JSON",
        help="Dispatch one JSON-RPC request and print the response.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    server = build_server()

    if args.catalog:
        catalog = server.to_catalog()
        print(json.dumps(catalog, indent=2))
        return 0

    if args.request is not None:
        try:
            payload = json.loads(args.request)
        except json.JSONDecodeError as error:
            parser.error(f"--request is not valid JSON: {error}")
        response = server.dispatch(payload)
        print(json.dumps(response, indent=2))
        return 1 if "error" in response else 0

    result = server.run_tool("get_profile")
    print(result.to_json())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
