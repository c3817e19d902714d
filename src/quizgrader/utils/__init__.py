"""
Utils Module

Logging configuration and async utility functions.
"""

from .logging import setup_logging, get_logger, get_submission_logger, PerformanceTimer
from .async_helpers import gather_settled, call_maybe_async, Settled

__all__ = [
    "setup_logging",
    "get_logger",
    "get_submission_logger",
    "PerformanceTimer",
    "gather_settled",
    "call_maybe_async",
    "Settled",
]
