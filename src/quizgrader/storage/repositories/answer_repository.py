"""
Answer Record Repository

SQL-backed answer store for submission audit rows.
"""

import threading
from typing import Any, Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import sessionmaker

from ...core.database import get_session_factory, is_sqlite_url
from ...core.exceptions import DatabaseError, PersistenceError
from ...evaluation.records import AnswerRecord
from ..models import AnswerRecordModel


class AnswerRecordRepository:
    """Repository for answer records; implements the AnswerStore protocol."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        """Initialize repository with an optional session factory."""
        self.session_factory = session_factory or get_session_factory()

        # SQLite admits a single writer at a time
        bind = self.session_factory.kw.get('bind')
        url = str(bind.url) if bind is not None else ''
        self._write_lock = threading.Lock() if is_sqlite_url(url) else None

    def insert(self, record: AnswerRecord) -> None:
        """Persist one answer record in its own transaction."""
        if self._write_lock is None:
            self._insert(record)
            return

        with self._write_lock:
            self._insert(record)

    def _insert(self, record: AnswerRecord) -> None:
        with self.session_factory() as session:
            try:
                session.add(AnswerRecordModel.from_domain(record))
                session.commit()
            except Exception as e:
                session.rollback()
                raise PersistenceError(
                    f"Failed to save answer record: {str(e)}",
                    submission_id=record.submission_id,
                    question_id=record.question_id
                ) from e

    def get_by_submission(self, submission_id: str) -> List[AnswerRecord]:
        """Get the records of one submission in insertion order."""
        try:
            with self.session_factory() as session:
                rows = (
                    session.query(AnswerRecordModel)
                    .filter(AnswerRecordModel.submission_id == submission_id)
                    .order_by(AnswerRecordModel.id)
                    .all()
                )
                return [row.to_domain() for row in rows]

        except Exception as e:
            raise DatabaseError(
                f"Failed to get answer records for submission {submission_id}: {str(e)}",
                operation="query",
                table="answer_records"
            ) from e

    def list_submissions(self, user_id: Optional[str] = None, limit: int = 20) -> List[Dict[str, Any]]:
        """Summaries of recent submissions, newest first."""
        try:
            with self.session_factory() as session:
                query = session.query(
                    AnswerRecordModel.submission_id,
                    AnswerRecordModel.user_id,
                    func.min(AnswerRecordModel.submitted_at).label('submitted_at'),
                    func.count(AnswerRecordModel.id).label('answers'),
                    func.avg(AnswerRecordModel.accuracy).label('mean_accuracy'),
                )

                if user_id:
                    query = query.filter(AnswerRecordModel.user_id == user_id)

                rows = (
                    query.group_by(AnswerRecordModel.submission_id, AnswerRecordModel.user_id)
                    .order_by(func.min(AnswerRecordModel.submitted_at).desc())
                    .limit(limit)
                    .all()
                )

                return [
                    {
                        'submission_id': row.submission_id,
                        'user_id': row.user_id,
                        'submitted_at': row.submitted_at,
                        'answers': row.answers,
                        'mean_accuracy': float(row.mean_accuracy or 0.0),
                    }
                    for row in rows
                ]

        except Exception as e:
            raise DatabaseError(
                f"Failed to list submissions: {str(e)}",
                operation="query",
                table="answer_records"
            ) from e
