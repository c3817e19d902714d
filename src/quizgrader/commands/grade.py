"""
Grade Command

Grades an answers file against the question catalog and stores the
answer records.
"""

import json
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
import yaml

from ..cli.formatting import console, format_results, format_summary
from ..core.exceptions import InvalidInputError, QuizGraderException
from ..storage.repositories import AnswerRecordRepository, QuestionRepository
from ..submission import SubmissionRunner
from ..utils.logging import get_logger

logger = get_logger(__name__)


def read_answers_file(path: Path) -> Tuple[Optional[str], Dict[str, str]]:
    """
    Read a submission file.

    The file is JSON or YAML and holds either a plain mapping of question id
    to answer text, or ``{"user_id": ..., "answers": {...}}``.
    """
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise InvalidInputError("Answers file must contain a mapping", field_name="answers")

    user_id = None
    if 'answers' in data and isinstance(data['answers'], dict):
        user_id = data.get('user_id')
        data = data['answers']

    answers = {str(k): '' if v is None else str(v) for k, v in data.items()}
    return (str(user_id) if user_id is not None else None), answers


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--user', '-u', 'user_id', help='Learner id (overrides the file)')
@click.option('--details/--no-details', default=True, help='Show per-question results')
@click.pass_context
def grade(ctx, path, user_id, details):
    """Grade a submitted answers file.

    \b
    EXAMPLES:

    quizgrader grade answers.json --user 2023000001
    quizgrader grade answers.yaml --no-details
    """
    try:
        file_user, answers = read_answers_file(path)
        user_id = user_id or file_user
        if not user_id:
            raise InvalidInputError("A user id is required (--user or 'user_id' in the file)",
                                    field_name="user_id")

        config = (ctx.obj or {}).get('config')
        runner = SubmissionRunner(QuestionRepository(), AnswerRecordRepository(), config=config)
        outcome = runner.submit_sync(user_id, answers)

    except QuizGraderException as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error while grading: {str(e)}[/red]")
        logger.exception("Grading failed")
        sys.exit(1)

    console.print(format_summary(outcome.summary))
    if details:
        console.print(format_results(outcome.results, answers))

    if outcome.partial:
        console.print(
            f"[yellow]⚠ {len(outcome.failures)} answer records were not saved: "
            f"{', '.join(outcome.failed_question_ids)}[/yellow]"
        )
