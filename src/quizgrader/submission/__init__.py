"""
Submission Module

Orchestration of submission grading: evaluation, aggregation and
fan-out persistence of answer records.
"""

from .types import PersistenceFailure, SubmissionOutcome
from .result_saver import ResultSaver
from .core import SubmissionRunner

__all__ = [
    "PersistenceFailure",
    "SubmissionOutcome",
    "ResultSaver",
    "SubmissionRunner",
]
