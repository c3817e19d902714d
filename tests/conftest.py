"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the
quiz-grader test suite.
"""

import pytest
from pathlib import Path
from typing import List

from sqlalchemy.orm import sessionmaker

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quizgrader.core.config import (
    AppConfig, DatabaseConfig, GradingConfig, LoggingConfig, PersistenceConfig, set_config
)
from quizgrader.core.database import close_connections, create_engine_for, create_tables, drop_tables
from quizgrader.evaluation.records import AnswerRecordBuilder
from quizgrader.evaluation.types import Question, QuestionType
from quizgrader.storage.memory import InMemoryAnswerStore, InMemoryQuestionCatalog


@pytest.fixture(autouse=True)
def reset_global_state():
    """Keep the global configuration and engine from leaking between tests."""
    set_config(None)
    yield
    set_config(None)
    close_connections()


@pytest.fixture
def grading_config():
    """Default grading rules."""
    return GradingConfig()


@pytest.fixture
def test_config(tmp_path):
    """Provide test configuration backed by an in-memory database."""
    return AppConfig(
        name="Test Quiz Grader",
        version="test",
        debug=True,
        database=DatabaseConfig(url="sqlite://"),
        persistence=PersistenceConfig(max_concurrent_writes=3),
        logging=LoggingConfig(level="DEBUG", file=str(tmp_path / "test.log")),
    )


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_engine_for(DatabaseConfig(url="sqlite://"))
    create_tables(engine)
    try:
        yield sessionmaker(bind=engine, expire_on_commit=False)
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture
def sample_questions() -> List[Question]:
    """One question of each type, difficulty 1 unless noted."""
    return [
        Question(id="q1", question_type=QuestionType.SINGLE_CHOICE, correct_answer="B"),
        Question(id="q2", question_type=QuestionType.FILL_BLANK, correct_answer="牛顿,万有引力"),
        Question(
            id="q3",
            question_type=QuestionType.SHORT_ANSWER,
            correct_answer="光合作用：吸收二氧化碳\n释放氧气\n需要光照\n发生在叶绿体",
            difficulty=2,
        ),
        Question(id="q4", question_type=QuestionType.CALCULATION, correct_answer="速度 = 20 m/s\n时间 = 5 s"),
        Question(id="q5", question_type=QuestionType.SINGLE_CHOICE, correct_answer="D", difficulty=3),
    ]


@pytest.fixture
def catalog(sample_questions):
    """In-memory catalog holding the sample questions."""
    return InMemoryQuestionCatalog(sample_questions)


@pytest.fixture
def answer_store():
    """Empty in-memory answer store."""
    return InMemoryAnswerStore()


@pytest.fixture
def fixed_record_builder():
    """Record builder with a predictable id and timestamp."""
    return AnswerRecordBuilder(
        id_factory=lambda: "sub-0001",
        clock=lambda: "2024-05-01T08:00:00+00:00",
    )
