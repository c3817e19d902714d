"""
Quiz Grader

Evaluates submitted quiz answers against canonical answers with per-type
matching strategies, partial credit and auditable per-answer records.
"""

__version__ = "1.0.0"

from .core.config import get_config
from .core.exceptions import QuizGraderException

__all__ = [
    "get_config",
    "QuizGraderException",
]
