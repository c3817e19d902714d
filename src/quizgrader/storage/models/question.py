"""
Question Model

SQLAlchemy ORM model for catalog questions.
"""

from typing import Optional
from sqlalchemy import String, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ...core.database import Base
from ...evaluation.types import Question, QuestionType
from .mixins import StringTimestampMixin


class QuestionModel(Base, StringTimestampMixin):
    """Model for a question in the catalog."""

    __tablename__ = "questions"
    __table_args__ = {'extend_existing': True}

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    question_type: Mapped[str] = mapped_column(String(50), nullable=False)
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False, default="")
    difficulty: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionModel":
        return cls(
            id=question.id,
            question_type=question.question_type.value,
            correct_answer=question.correct_answer,
            difficulty=question.difficulty,
            content=question.content,
        )

    def to_domain(self) -> Question:
        return Question(
            id=self.id,
            question_type=QuestionType.parse(self.question_type),
            correct_answer=self.correct_answer or "",
            difficulty=self.difficulty,
            content=self.content,
        )

    def __repr__(self) -> str:
        return f"<QuestionModel(id={self.id}, type='{self.question_type}', difficulty={self.difficulty})>"
