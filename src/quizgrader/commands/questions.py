"""
Question Commands

Import and list catalog questions.
"""

import sys

import click

from ..cli.formatting import console, format_table
from ..core.database import create_tables
from ..storage.loader import load_questions_file
from ..storage.repositories import QuestionRepository
from ..utils.logging import get_logger

logger = get_logger(__name__)


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
def load(path):
    """Import a CSV or YAML question bank.

    \b
    EXAMPLES:

    quizgrader questions load questions.csv
    quizgrader questions load bank.yaml
    """
    try:
        questions = load_questions_file(path)
        create_tables()
        saved = QuestionRepository().save_questions(questions)
        console.print(f"[green]✓ Loaded {saved} questions from {path}[/green]")
    except Exception as e:
        console.print(f"[red]Error loading questions: {str(e)}[/red]")
        logger.exception("Question import failed")
        sys.exit(1)


@click.command(name='list')
@click.option('--limit', '-n', type=int, default=50, show_default=True, help='Maximum questions to show')
def list_questions(limit):
    """List catalog questions."""
    try:
        questions = QuestionRepository().list_questions(limit=limit)
        rows = [
            {
                'ID': q.id,
                'Type': q.question_type.value,
                'Difficulty': q.difficulty,
                'Answer': q.correct_answer.replace('\n', ' / '),
            }
            for q in questions
        ]
        console.print(format_table(rows, title="Questions"))
    except Exception as e:
        console.print(f"[red]Error listing questions: {str(e)}[/red]")
        logger.exception("Question listing failed")
        sys.exit(1)
