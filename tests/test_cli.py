"""
Tests for the usergraph CLI
"""

from unittest.mock import patch

from click.testing import CliRunner

from usergraph import __version__
from usergraph.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert f"usergraph, version {__version__}" in result.output


def test_schema_command_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "scalar EmailAddress" in result.output
    assert "createUser(input: CreateUserInput!): User" in result.output


def test_serve_defaults():
    with patch("usergraph.cli.uvicorn.run") as run:
        result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 0
    run.assert_called_once()
    args, kwargs = run.call_args
    assert args == ("usergraph.api.app:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 4000
    assert kwargs["reload"] is False


def test_serve_options():
    with patch("usergraph.cli.uvicorn.run") as run:
        result = CliRunner().invoke(
            cli, ["serve", "--host", "127.0.0.1", "--port", "8000", "--log-level", "debug"]
        )

    assert result.exit_code == 0
    kwargs = run.call_args.kwargs
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 8000
    assert kwargs["log_level"] == "debug"


def test_serve_startup_failure_exits_nonzero():
    with patch("usergraph.cli.uvicorn.run", side_effect=RuntimeError("address in use")):
        result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1
