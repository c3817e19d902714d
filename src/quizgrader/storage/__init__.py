"""
Storage Module

Question catalog and answer store capabilities: protocols, SQLAlchemy
models and repositories, in-memory implementations and question bank loading.
"""

from .base import QuestionCatalog, AnswerStore
from .models import QuestionModel, AnswerRecordModel
from .repositories import QuestionRepository, AnswerRecordRepository
from .memory import InMemoryQuestionCatalog, InMemoryAnswerStore
from .loader import load_questions_file

__all__ = [
    "QuestionCatalog",
    "AnswerStore",
    "QuestionModel",
    "AnswerRecordModel",
    "QuestionRepository",
    "AnswerRecordRepository",
    "InMemoryQuestionCatalog",
    "InMemoryAnswerStore",
    "load_questions_file",
]
