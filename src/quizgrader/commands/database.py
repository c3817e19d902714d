"""
Database Commands

Database initialization command implementation.
"""

import sys

import click

from ..cli.formatting import console
from ..core.config import get_config
from ..core.database import check_database_connection, create_tables
from ..utils.logging import get_logger

logger = get_logger(__name__)


@click.command()
def init():
    """Create the question and answer record tables.

    \b
    EXAMPLES:

    quizgrader db init
    """
    try:
        check_database_connection()
        create_tables()
        console.print(f"[green]✓ Database initialized at {get_config().database.url}[/green]")
    except Exception as e:
        console.print(f"[red]Error initializing database: {str(e)}[/red]")
        logger.exception("Database initialization failed")
        sys.exit(1)
