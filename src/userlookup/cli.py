#!/usr/bin/env python3
"""
Main CLI entry point for the user lookup service.
"""

import asyncio
import sys

import click
import uvicorn

from userlookup import __version__
from userlookup.config import settings
from userlookup.errors import DatabaseConnectionError
from userlookup.logging import configure_logging, get_logger

logger = get_logger(__name__)

database_url_option = click.option(
    "--database-url",
    default=None,
    help="Database URL (default: USERLOOKUP_DATABASE_URL or settings)",
)


@click.group()
@click.version_option(version=__version__, prog_name="userlookup")
def cli() -> None:
    """User lookup CLI - run the server and manage the development database."""
    pass


async def run_server(host: str, port: int, database_url: str | None, log_level: str) -> None:
    """Connect storage, build the application, then bind the listener."""
    from userlookup.api.app import create_app
    from userlookup.database import Database

    database = Database(database_url)
    await database.connect()

    app = create_app(database)
    # Importing the app module configures logging from settings; restore the CLI level
    configure_logging(debug=(log_level == "debug"))

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=True)
    server = uvicorn.Server(config)
    try:
        await server.serve()
    finally:
        await database.dispose()


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@database_url_option
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, database_url: str | None, log_level: str) -> None:
    """Start the user lookup API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting user lookup API server", host=host, port=port, log_level=log_level)

    try:
        asyncio.run(run_server(host, port, database_url, log_level))
    except DatabaseConnectionError as e:
        logger.error("Server startup failed", error=str(e))
        click.echo(f"✗ Cannot start server: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")


@cli.command("init-db")
@database_url_option
def init_db(database_url: str | None) -> None:
    """Create the users table if it does not exist."""
    from userlookup.database import Database

    configure_logging()

    async def do_init():
        database = Database(database_url)
        try:
            await database.connect()
            await database.create_schema()
        finally:
            await database.dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database schema ready")


@cli.command()
@click.argument("names", nargs=-1)
@database_url_option
def seed(names: tuple[str, ...], database_url: str | None) -> None:
    """Ensure users with the given NAMES exist (sample users if none are given)."""
    from userlookup.database import Database
    from userlookup.database.seed_data import seed_users

    configure_logging()

    async def do_seed() -> list[int]:
        database = Database(database_url)
        try:
            await database.connect()
            await database.create_schema()
            async with database.session() as db:
                return await seed_users(db, names or None)
        finally:
            await database.dispose()

    try:
        user_ids = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Seeded {len(user_ids)} user(s): {', '.join(str(i) for i in user_ids)}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
