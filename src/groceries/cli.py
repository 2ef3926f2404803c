#!/usr/bin/env python3
"""
Main CLI entry point for the Groceries API server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from groceries import __version__
from groceries.config import settings
from groceries.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="groceries")
def cli() -> None:
    """Groceries CLI - run the API server and manage stored data."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: GROCERIES_LOG_LEVEL, else info)",
)
def serve(host: str, port: int, reload: bool, log_level: str | None) -> None:
    """Start the Groceries API server."""
    log_level = log_level or settings.log_level.lower()

    # The app module configures logging from these settings when uvicorn imports it
    settings.log_level = log_level.upper()
    if log_level == "debug":
        settings.debug = True
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    # A reloading server imports the app in a child process that reads the environment
    os.environ["GROCERIES_LOG_LEVEL"] = settings.log_level
    os.environ["GROCERIES_DEBUG"] = str(settings.debug).lower()

    logger.info("Starting Groceries API server", host=host, port=port, reload=reload)

    try:
        uvicorn.run(
            "groceries.api.app:app",
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


@cli.command()
@click.argument("seed_file", type=click.Path(exists=True, dir_okay=False))
def seed(seed_file: str) -> None:
    """Load a YAML seed file into the configured storage backend."""
    from groceries.seed import SeedDataError, seed_from_file
    from groceries.storage import StorageException, create_storage

    configure_logging()

    if settings.storage_backend == "memory":
        click.echo("✗ Seeding in-memory storage has no lasting effect; use file or sql", err=True)
        sys.exit(1)

    async def do_seed() -> int:
        storage = create_storage(settings)
        try:
            return await seed_from_file(storage, seed_file)
        finally:
            await storage.close()

    try:
        count = asyncio.run(do_seed())
    except (SeedDataError, StorageException) as e:
        logger.error("Failed to seed storage", error=str(e))
        click.echo(f"✗ Error seeding storage: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Seeded {count} records into {settings.storage_backend} storage")


if __name__ == "__main__":
    cli()
