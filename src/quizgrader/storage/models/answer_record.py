"""
Answer Record Model

SQLAlchemy ORM model for the per-question audit rows of a submission.
"""

from sqlalchemy import Column, Integer, String, Text, Float, Index, CheckConstraint, UniqueConstraint

from ...core.database import Base
from ...evaluation.records import AnswerRecord


class AnswerRecordModel(Base):
    """Model for one answered question of a submission. Rows are never updated."""

    __tablename__ = "answer_records"
    __table_args__ = (
        Index('idx_answer_submission_id', 'submission_id'),
        Index('idx_answer_user_id', 'user_id'),
        Index('idx_answer_question_id', 'question_id'),
        UniqueConstraint('submission_id', 'question_id', name='uq_answer_submission_question'),
        CheckConstraint('accuracy >= 0 AND accuracy <= 1', name='check_accuracy_range'),
        {'extend_existing': True}
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    submission_id = Column(String(64), nullable=False)
    submitted_at = Column(String(64), nullable=False)
    user_id = Column(String(255), nullable=False)
    question_id = Column(String(255), nullable=False)
    input_answer = Column(Text, nullable=False, default="")
    accuracy = Column(Float, nullable=False)

    @classmethod
    def from_domain(cls, record: AnswerRecord) -> "AnswerRecordModel":
        return cls(
            submission_id=record.submission_id,
            submitted_at=record.timestamp,
            user_id=record.user_id,
            question_id=record.question_id,
            input_answer=record.input_answer,
            accuracy=record.accuracy,
        )

    def to_domain(self) -> AnswerRecord:
        return AnswerRecord(
            submission_id=self.submission_id,
            timestamp=self.submitted_at,
            user_id=self.user_id,
            question_id=self.question_id,
            input_answer=self.input_answer or "",
            accuracy=float(self.accuracy),
        )

    def __repr__(self) -> str:
        return f"<AnswerRecordModel(submission={self.submission_id}, question={self.question_id}, accuracy={self.accuracy})>"
