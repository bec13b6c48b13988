#!/usr/bin/env python3
"""
CLI entry point for catalog database migrations and seeding.
"""

import asyncio
import sys
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from catalog import __version__
from catalog.logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config() -> Config:
    """Get Alembic configuration."""
    # alembic.ini lives at the project root, next to src/
    project_dir = Path(__file__).parent.parent.parent.parent
    alembic_ini = project_dir / "alembic.ini"

    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(project_dir / "alembic"))
    return config


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="catalog-db")
def main(log_level: str) -> None:
    """Catalog database management."""
    configure_logging(debug=(log_level == "debug"), level=log_level)


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    try:
        config = get_alembic_config()
        logger.info("Upgrading database", revision=revision)
        command.upgrade(config, revision)
        logger.info("Database upgrade completed successfully")
    except Exception as e:
        logger.error("Database upgrade failed", error=str(e))
        sys.exit(1)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    try:
        config = get_alembic_config()
        logger.info("Downgrading database", revision=revision)
        command.downgrade(config, revision)
        logger.info("Database downgrade completed successfully")
    except Exception as e:
        logger.error("Database downgrade failed", error=str(e))
        sys.exit(1)


@main.command()
@click.option("-m", "--message", required=True, help="Revision message")
@click.option("--autogenerate/--no-autogenerate", default=True, help="Auto-generate migration")
def revision(message: str, autogenerate: bool) -> None:
    """Create a new migration revision."""
    try:
        config = get_alembic_config()
        logger.info("Creating new migration", message=message, autogenerate=autogenerate)
        command.revision(config, message=message, autogenerate=autogenerate)
        logger.info("Migration created successfully")
    except Exception as e:
        logger.error("Migration creation failed", error=str(e))
        sys.exit(1)


@main.command()
def current() -> None:
    """Show current database revision."""
    try:
        command.current(get_alembic_config())
    except Exception as e:
        logger.error("Failed to get current revision", error=str(e))
        sys.exit(1)


@main.command()
def history() -> None:
    """Show migration history."""
    try:
        command.history(get_alembic_config())
    except Exception as e:
        logger.error("Failed to get migration history", error=str(e))
        sys.exit(1)


async def _seed() -> int:
    from catalog.database.connection import get_async_session
    from catalog.database.seed_data import ensure_sample_products

    async with get_async_session() as session:
        return await ensure_sample_products(session)


@main.command()
def seed() -> None:
    """Insert sample products into an empty products table."""
    try:
        inserted = asyncio.run(_seed())
        click.echo(f"Inserted {inserted} sample products")
    except Exception as e:
        logger.error("Seeding failed", error=str(e))
        sys.exit(1)


@main.command()
def check() -> None:
    """Check that the database is reachable."""
    from catalog.database.connection import check_database_connection

    ok, message = asyncio.run(check_database_connection())
    if not ok:
        logger.error("Database check failed", error=message)
        sys.exit(1)
    click.echo("Database connection OK")


if __name__ == "__main__":
    main()
