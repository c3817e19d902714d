"""
Question Repository

SQL-backed question catalog.
"""

from typing import Iterable, List, Optional, Set
from sqlalchemy import func
from sqlalchemy.orm import sessionmaker

from ...core.database import get_session_factory
from ...core.exceptions import CatalogUnavailableError, DatabaseError
from ...evaluation.types import Question
from ...utils.logging import get_logger
from ..models import QuestionModel

logger = get_logger(__name__)


class QuestionRepository:
    """Repository for catalog questions; implements the QuestionCatalog protocol."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        """Initialize repository with an optional session factory."""
        self.session_factory = session_factory or get_session_factory()

    def get_by_ids(self, ids: Set[str]) -> List[Question]:
        """Get the questions with the given ids, ordered by id."""
        if not ids:
            return []

        try:
            with self.session_factory() as session:
                rows = (
                    session.query(QuestionModel)
                    .filter(QuestionModel.id.in_([str(i) for i in ids]))
                    .order_by(QuestionModel.id)
                    .all()
                )
                return [row.to_domain() for row in rows]

        except Exception as e:
            raise CatalogUnavailableError(
                f"Failed to look up questions: {str(e)}",
                question_ids=ids
            ) from e

    def list_questions(self, limit: Optional[int] = None, offset: int = 0) -> List[Question]:
        """Get all questions with optional pagination."""
        try:
            with self.session_factory() as session:
                query = session.query(QuestionModel).order_by(QuestionModel.id)

                if offset:
                    query = query.offset(offset)
                if limit:
                    query = query.limit(limit)

                return [row.to_domain() for row in query.all()]

        except Exception as e:
            raise DatabaseError(
                f"Failed to get questions: {str(e)}",
                operation="query",
                table="questions"
            ) from e

    def save_questions(self, questions: Iterable[Question]) -> int:
        """Insert or replace questions; returns the number written."""
        with self.session_factory() as session:
            try:
                count = 0
                for question in questions:
                    session.merge(QuestionModel.from_domain(question))
                    count += 1
                session.commit()
                logger.info(f"Saved {count} questions")
                return count

            except Exception as e:
                session.rollback()
                raise DatabaseError(
                    f"Failed to save questions: {str(e)}",
                    operation="insert",
                    table="questions"
                ) from e

    def count(self) -> int:
        try:
            with self.session_factory() as session:
                return session.query(func.count(QuestionModel.id)).scalar() or 0
        except Exception as e:
            raise DatabaseError(
                f"Failed to count questions: {str(e)}",
                operation="count",
                table="questions"
            ) from e
