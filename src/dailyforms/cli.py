"""Command-line interface for DailyForms.

This module provides the CLI commands for running and managing
the DailyForms service.
"""

import asyncio
from typing import NoReturn

import click

from dailyforms.core.config import get_settings
from dailyforms.core.logging import configure_logging, get_logger

TABLES = ("collectors", "fields", "entries", "entry_values", "files")


@click.group()
@click.version_option(version="0.1.0", prog_name="DailyForms")
def cli() -> None:
    """DailyForms - daily form-based data collection."""


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload (defaults to on in development)",
)
def serve(host: str | None, port: int | None, reload: bool | None) -> None:
    """Start the DailyForms server."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.host
    bind_port = port or settings.port
    if reload is None:
        reload = settings.is_development

    configure_logging(settings)
    logger = get_logger(__name__)
    logger.info(
        "Starting DailyForms server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "dailyforms.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else settings.workers,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command("init-db")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create all database tables."""
    from dailyforms.infrastructure.persistence.database import DatabaseManager

    settings = get_settings()
    configure_logging(settings)

    if not force:
        click.confirm("This will create all database tables. Continue?", abort=True, default=False)

    async def initialize() -> bool:
        db = DatabaseManager(settings)
        try:
            if not await db.check_connection():
                return False
            await db.create_tables()
            return True
        finally:
            await db.disconnect()

    if not asyncio.run(initialize()):
        click.echo("ERROR: Database is unreachable.", err=True)
        raise SystemExit(1)
    click.echo("Database initialized successfully.")


@cli.command()
def info() -> None:
    """Show configuration and row counts."""
    from dailyforms.core.exceptions import StorageError
    from dailyforms.infrastructure.persistence.database import DatabaseManager

    settings = get_settings()

    click.echo(f"DailyForms v{settings.app_version}")
    click.echo(f"Environment: {settings.environment}")
    click.echo(f"Database:    {settings.database_url}")
    click.echo(f"API prefix:  {settings.api_prefix}")

    async def count_rows() -> dict[str, int]:
        db = DatabaseManager(settings)
        try:
            counts = {}
            for table in TABLES:
                with db.translate_errors("count rows", table=table):
                    rows = await db.fetch_all(f'SELECT count(*) AS total FROM "{table}"')
                counts[table] = rows[0]["total"]
            return counts
        finally:
            await db.disconnect()

    try:
        counts = asyncio.run(count_rows())
    except StorageError as e:
        click.echo(f"Rows:        unavailable ({e.message})")
        return
    for table, total in counts.items():
        click.echo(f"  {table:<13} {total}")


def main() -> NoReturn:
    """Main entry point for the CLI."""
    cli()
    raise SystemExit(0)
