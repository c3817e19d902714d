"""
Custom Exception Classes

Application-specific exception classes for submission grading, catalog
lookups and answer record persistence.
"""

from typing import Optional, Any, Dict, Iterable


class QuizGraderException(Exception):
    """Base exception class for all quiz-grader errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(QuizGraderException):
    """Raised when there's an issue with configuration setup or validation."""
    pass


class DatabaseError(QuizGraderException):
    """Raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 table: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.operation = operation
        self.table = table


class InvalidInputError(QuizGraderException):
    """Raised when a submission carries no answers or malformed data."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name


class NotFoundError(QuizGraderException):
    """Raised when none of the requested questions could be resolved."""

    def __init__(self, message: str, question_ids: Optional[Iterable[str]] = None, **kwargs):
        super().__init__(message, kwargs)
        self.question_ids = sorted(question_ids) if question_ids else []


class CatalogUnavailableError(QuizGraderException):
    """Raised when the question catalog cannot be queried."""

    def __init__(self, message: str, question_ids: Optional[Iterable[str]] = None, **kwargs):
        super().__init__(message, kwargs)
        self.question_ids = sorted(question_ids) if question_ids else []


class PersistenceError(QuizGraderException):
    """Raised by an answer store when a single record cannot be written."""

    def __init__(self, message: str, submission_id: Optional[str] = None,
                 question_id: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.submission_id = submission_id
        self.question_id = question_id
