"""
Commands Module

Command-line interface commands for quiz-grader.
"""

from .database import init as database_init
from .questions import load as questions_load, list_questions
from .grade import grade
from .submissions import show as submissions_show, list_submissions

__all__ = [
    'database_init',
    'questions_load',
    'list_questions',
    'grade',
    'submissions_show',
    'list_submissions',
]
