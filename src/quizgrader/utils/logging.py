"""
Logging Configuration

Logging setup for the grader: console and rotating file output, with the
submission and question a record belongs to stamped on every file line.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime

from ..core.config import get_config

# Record attributes set by the submission adapter and the result saver
CONTEXT_FIELDS = ('submission_id', 'user_id', 'question_id')

FILE_FORMAT = (
    '%(asctime)s - %(name)s - %(levelname)s - '
    '[submission=%(submission_id)s user=%(user_id)s question=%(question_id)s] - %(message)s'
)


class SubmissionContextFilter(logging.Filter):
    """Fill in context fields missing from a record so FILE_FORMAT always renders."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in CONTEXT_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, '-')
        return True


class SubmissionLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds submission context to log records."""

    def process(self, msg: str, kwargs: dict) -> tuple:
        extra = kwargs.get('extra', {})
        extra.update(self.extra)
        kwargs['extra'] = extra
        return msg, kwargs


def setup_logging(config=None) -> None:
    """
    Set up logging for the application.

    Args:
        config: Optional configuration object (uses default if None)
    """
    if config is None:
        config = get_config()

    log_file = Path(config.logging.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.logging.level.upper()))
    root_logger.handlers.clear()

    # Console stays terse; the file carries the submission context
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.logging.console_level.upper()))
    console_handler.setFormatter(logging.Formatter(config.logging.format))

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=_parse_size(config.logging.max_size),
        backupCount=config.logging.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(getattr(logging, config.logging.level.upper()))
    file_handler.addFilter(SubmissionContextFilter())
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    _configure_third_party_loggers()

    logging.getLogger(__name__).info(
        f"Logging configured - console {config.logging.console_level}, file {config.logging.level} at {log_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_submission_logger(submission_id: str, user_id: Optional[str] = None) -> SubmissionLoggerAdapter:
    """
    Get a logger adapter with submission context.

    Args:
        submission_id: Submission identifier shared by a batch of answers
        user_id: Optional learner identifier

    Returns:
        Logger adapter with submission context
    """
    extra = {'submission_id': submission_id}

    if user_id:
        extra['user_id'] = user_id

    return SubmissionLoggerAdapter(get_logger('quizgrader.submission'), extra)


def _parse_size(size_str: str) -> int:
    """
    Parse size string (e.g., '10MB') to bytes.

    Returns 10MB when the string cannot be parsed.
    """
    size_str = size_str.upper().strip()

    # Longest suffixes first so 'MB' is not read as 'B'
    multipliers = {
        'GB': 1024 ** 3,
        'MB': 1024 ** 2,
        'KB': 1024,
        'B': 1,
    }

    for unit, multiplier in multipliers.items():
        if size_str.endswith(unit):
            number_str = size_str[:-len(unit)].strip()
            try:
                return int(float(number_str) * multiplier)
            except ValueError:
                break

    return 10 * 1024 * 1024


def _configure_third_party_loggers() -> None:
    """Reduce noise from third-party libraries."""
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)


class PerformanceTimer:
    """Context manager for timing operations."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None):
        self.operation = operation
        self.logger = logger or get_logger(__name__)
        self.start_time = None
        self.duration: Optional[float] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.debug(f"Started {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {self.duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation} after {self.duration:.3f}s: {exc_val}")
