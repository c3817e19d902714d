"""
Question Bank Loader

Reads question banks from CSV or YAML files into Question objects.
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd
import yaml

from ..core.exceptions import InvalidInputError
from ..evaluation.types import Question, QuestionType
from ..utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_COLUMNS = ('id', 'type', 'correct_answer')


def load_questions_file(path: Union[str, Path]) -> List[Question]:
    """
    Load a question bank.

    CSV files need the columns ``id``, ``type`` and ``correct_answer`` and may
    carry ``difficulty`` and ``content``. YAML files hold a list of mappings
    with the same keys, or a mapping with a ``questions`` list.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == '.csv':
        rows = _read_csv(path)
    elif suffix in ('.yaml', '.yml'):
        rows = _read_yaml(path)
    else:
        raise InvalidInputError(f"Unsupported question file format: {path.suffix}", field_name="path")

    questions = [_row_to_question(row, index) for index, row in enumerate(rows)]

    unknown = [q.id for q in questions if q.question_type == QuestionType.UNKNOWN]
    if unknown:
        logger.warning(f"{len(unknown)} questions have an unknown type and will be graded by exact match: {unknown}")

    logger.info(f"Loaded {len(questions)} questions from {path}")
    return questions


def _read_csv(path: Path) -> List[Dict[str, Any]]:
    # Keep answers as text: "1,2" or "007" must not be parsed as numbers
    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidInputError(f"Question file is missing columns: {missing}", field_name="columns")

    return df.to_dict(orient='records')


def _read_yaml(path: Path) -> List[Dict[str, Any]]:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        data = data.get('questions', [])

    if not isinstance(data, list):
        raise InvalidInputError("YAML question file must contain a list of questions")

    return data


def _row_to_question(row: Dict[str, Any], index: int) -> Question:
    if not isinstance(row, dict):
        raise InvalidInputError(f"Question #{index} is not a mapping")

    # A blank correct answer is allowed; it simply never scores
    missing = [c for c in ('id', 'type') if row.get(c) in (None, '')]
    if missing:
        raise InvalidInputError(f"Question #{index} is missing {missing}", field_name=missing[0])

    correct_answer = row.get('correct_answer')

    return Question(
        id=str(row['id']).strip(),
        question_type=QuestionType.parse(row['type']),
        correct_answer='' if correct_answer is None else str(correct_answer),
        difficulty=row.get('difficulty') or 1,
        content=row.get('content') or None,
    )
