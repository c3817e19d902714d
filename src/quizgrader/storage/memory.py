"""
In-Memory Storage

Dictionary-backed question catalog and answer store for embedding the
grader without a database, and for tests. The answer store can be told to
fail for specific questions to exercise partial persistence.
"""

import threading
from typing import Dict, Iterable, List, Optional, Set

from ..core.exceptions import CatalogUnavailableError, PersistenceError
from ..evaluation.records import AnswerRecord
from ..evaluation.types import Question


class InMemoryQuestionCatalog:
    """QuestionCatalog holding questions in insertion order."""

    def __init__(self, questions: Optional[Iterable[Question]] = None):
        self._questions: Dict[str, Question] = {}
        self.available = True
        for question in questions or []:
            self.add(question)

    def add(self, question: Question) -> None:
        self._questions[question.id] = question

    def get_by_ids(self, ids: Set[str]) -> List[Question]:
        if not self.available:
            raise CatalogUnavailableError("Question catalog is unavailable", question_ids=ids)

        wanted = {str(i) for i in ids}
        return [q for q in self._questions.values() if q.id in wanted]

    def __len__(self) -> int:
        return len(self._questions)


class InMemoryAnswerStore:
    """AnswerStore keeping records in a list."""

    def __init__(self, fail_for: Optional[Iterable[str]] = None):
        self.records: List[AnswerRecord] = []
        self.fail_for: Set[str] = set(fail_for or [])
        self._lock = threading.Lock()

    def insert(self, record: AnswerRecord) -> None:
        if record.question_id in self.fail_for:
            raise PersistenceError(
                f"Write rejected for question {record.question_id}",
                submission_id=record.submission_id,
                question_id=record.question_id
            )

        with self._lock:
            if any(r.submission_id == record.submission_id and r.question_id == record.question_id
                   for r in self.records):
                raise PersistenceError(
                    "Answer record already exists",
                    submission_id=record.submission_id,
                    question_id=record.question_id
                )
            self.records.append(record)

    def get_by_submission(self, submission_id: str) -> List[AnswerRecord]:
        with self._lock:
            return [r for r in self.records if r.submission_id == submission_id]
