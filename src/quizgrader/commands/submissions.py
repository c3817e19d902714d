"""
Submission Commands

Inspect stored answer records.
"""

import sys

import click

from ..cli.formatting import console, format_table
from ..storage.repositories import AnswerRecordRepository
from ..utils.logging import get_logger

logger = get_logger(__name__)


@click.command()
@click.argument('submission_id')
def show(submission_id):
    """Show the answer records of one submission."""
    try:
        records = AnswerRecordRepository().get_by_submission(submission_id)
    except Exception as e:
        console.print(f"[red]Error reading submission: {str(e)}[/red]")
        logger.exception("Submission lookup failed")
        sys.exit(1)

    if not records:
        console.print(f"[yellow]No answer records for submission {submission_id}[/yellow]")
        sys.exit(1)

    rows = [
        {
            'Question': r.question_id,
            'Answer': r.input_answer,
            'Accuracy': f"{r.accuracy:.2f}",
        }
        for r in records
    ]
    console.print(f"[dim]User {records[0].user_id} at {records[0].timestamp}[/dim]")
    console.print(format_table(rows, title=f"Submission {submission_id}"))


@click.command(name='list')
@click.option('--user', '-u', 'user_id', help='Only submissions of this learner')
@click.option('--limit', '-n', type=int, default=20, show_default=True)
def list_submissions(user_id, limit):
    """List recent submissions."""
    try:
        rows = AnswerRecordRepository().list_submissions(user_id=user_id, limit=limit)
    except Exception as e:
        console.print(f"[red]Error listing submissions: {str(e)}[/red]")
        logger.exception("Submission listing failed")
        sys.exit(1)

    for row in rows:
        row['mean_accuracy'] = f"{row['mean_accuracy']:.2f}"
    console.print(format_table(rows, title="Submissions"))
