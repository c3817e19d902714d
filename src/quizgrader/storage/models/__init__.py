"""
Storage Models

SQLAlchemy ORM models for the question catalog and answer records.
"""

from .question import QuestionModel
from .answer_record import AnswerRecordModel

__all__ = [
    "QuestionModel",
    "AnswerRecordModel",
]
