"""CLI behavior smoke tests."""

from __future__ import annotations

import json

import pytest
from pytest import CaptureFixture

from linkedin_mcp import cli


def test_cli_outputs_profile(capsys: CaptureFixture[str]) -> None:
    """Running the CLI without flags should print the demo profile."""
    # Arrange
    argv: list[str] = []

    # Act
    exit_code = cli.main(argv)

    # Assert
    assert exit_code == 0
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["status"] == "demo"
    assert parsed["data"]["id"] == "sample-user-id"


def test_cli_catalog_flag(capsys: CaptureFixture[str]) -> None:
    """Catalog flag should print tool discovery metadata."""
    # Arrange
    argv: list[str] = ["--catalog"]

    # Act
    exit_code = cli.main(argv)

    # Assert
    assert exit_code == 0
    catalog = json.loads(capsys.readouterr().out)
    assert list(catalog) == [
        "get_profile",
        "create_post",
        "search_organizations",
        "get_organizations",
    ]
    assert catalog["create_post"]["description"]


def test_cli_dispatches_request(capsys: CaptureFixture[str]) -> None:
    """--request prints the JSON-RPC response envelope."""
    # Arrange
    request = {
        "jsonrpc": "2.0",
        "id": 0,
        "method": "tools/call",
        "params": {"name": "get_organizations", "arguments": {"role": "MEMBER"}},
    }

    # Act
    exit_code = cli.main(["--request", json.dumps(request)])

    # Assert
    assert exit_code == 0
    response = json.loads(capsys.readouterr().out)
    assert response["id"] == 0
    payload = json.loads(response["result"]["content"][0]["text"])
    assert payload["data"]["elements"][0]["role"] == "MEMBER"


def test_cli_reports_error_responses(capsys: CaptureFixture[str]) -> None:
    """Error envelopes are printed and give a non-zero exit code."""
    # Act
    exit_code = cli.main(["--request", '{"method": "resources/list"}'])

    # Assert
    assert exit_code == 1
    response = json.loads(capsys.readouterr().out)
    assert response["error"]["code"] == -32601


def test_cli_rejects_invalid_json() -> None:
    """Unparseable --request values are usage errors."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--request", "{not json"])

    assert excinfo.value.code == 2
