"""
CLI Entry Point

Main command-line interface for quiz-grader using Click framework with rich
output formatting.
"""

import sys
from pathlib import Path

import click

from .cli.formatting import console
from .core.config import get_config, reload_config
from .core.exceptions import QuizGraderException
from .utils.logging import setup_logging, get_logger
from .commands import (
    database_init,
    questions_load,
    list_questions,
    grade,
    submissions_show,
    list_submissions,
)

logger = get_logger(__name__)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config, verbose):
    """quiz-grader - score quiz submissions and keep an audit trail"""
    ctx.ensure_object(dict)

    try:
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()

        if verbose:
            app_config.logging.level = 'DEBUG'
            app_config.logging.console_level = 'DEBUG'
        setup_logging(app_config)

        ctx.obj['config'] = app_config

    except Exception as e:
        console.print(f"[red]Error initializing application: {str(e)}[/red]")
        sys.exit(1)


# ===== DATABASE COMMANDS =====

@cli.group()
def db():
    """Database management commands."""
    pass


db.add_command(database_init)


# ===== QUESTION COMMANDS =====

@cli.group()
def questions():
    """Question catalog commands."""
    pass


questions.add_command(questions_load)
questions.add_command(list_questions)


# ===== SUBMISSION COMMANDS =====

@cli.group()
def submissions():
    """Stored submission commands."""
    pass


submissions.add_command(submissions_show)
submissions.add_command(list_submissions)


# ===== TOP-LEVEL COMMANDS =====

cli.add_command(grade)


def main():
    """Main entry point with error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except QuizGraderException as e:
        logger.error(f"Application error: {str(e)}")
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
