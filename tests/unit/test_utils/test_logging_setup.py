"""
Tests for Logging Setup
"""

import logging

import pytest

from quizgrader.utils.logging import (
    PerformanceTimer, SubmissionContextFilter, _parse_size, get_submission_logger, setup_logging
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize("size, expected", [
    ("10MB", 10 * 1024 ** 2),
    ("512 kb", 512 * 1024),
    ("1GB", 1024 ** 3),
    ("100B", 100),
    ("lots", 10 * 1024 ** 2),
])
def test_parse_size(size, expected):
    assert _parse_size(size) == expected


def test_context_filter_fills_missing_fields():
    record = logging.LogRecord("quizgrader.submission", logging.INFO, __file__, 10,
                               "Scored %d points", (14,), None)
    record.submission_id = "sub-0001"

    assert SubmissionContextFilter().filter(record) is True
    assert record.submission_id == "sub-0001"
    assert record.user_id == "-"
    assert record.question_id == "-"


def test_submission_logger_adds_context(caplog):
    log = get_submission_logger("sub-0001", user_id="alice")

    with caplog.at_level(logging.INFO, logger="quizgrader.submission"):
        log.info("graded")

    [record] = caplog.records
    assert record.submission_id == "sub-0001"
    assert record.user_id == "alice"


def test_setup_logging_stamps_context_on_file_lines(test_config, restore_root_logger):
    setup_logging(test_config)

    get_submission_logger("sub-0001", user_id="alice").warning("persisted 4/5 records")
    logging.getLogger("quizgrader.test").warning("no context here")
    for handler in restore_root_logger.handlers:
        handler.flush()

    with open(test_config.logging.file, encoding="utf-8") as f:
        lines = f.read().splitlines()

    assert "[submission=sub-0001 user=alice question=-] - persisted 4/5 records" in lines[-2]
    assert "[submission=- user=- question=-] - no context here" in lines[-1]


def test_performance_timer_records_duration():
    with PerformanceTimer("grading") as timer:
        pass

    assert timer.duration is not None
    assert timer.duration >= 0
