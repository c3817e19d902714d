"""
Storage Repositories

Repository classes implementing the repository pattern for data access.
"""

from .question_repository import QuestionRepository
from .answer_repository import AnswerRecordRepository

__all__ = [
    "QuestionRepository",
    "AnswerRecordRepository",
]
