#!/usr/bin/env python3
"""
Main CLI entry point for the usergraph server.
"""

import os
import sys

import click
import uvicorn

from usergraph import __version__
from usergraph.config import Settings
from usergraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="usergraph")
def cli() -> None:
    """usergraph CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: USERGRAPH_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: USERGRAPH_API_PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the usergraph API server."""
    settings = Settings()
    host = host or settings.api_host
    port = port or settings.api_port
    reload = reload or settings.api_reload

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting usergraph API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app factory reads settings from the environment, including under reload
    if log_level == "debug":
        os.environ["USERGRAPH_DEBUG"] = "true"
    os.environ["USERGRAPH_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "usergraph.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("schema")
def print_schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from usergraph.graphql.schema import build_schema

    click.echo(build_schema().as_str())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
