"""
Evaluation Types

Domain types shared by the matching strategies, score calculator and
submission evaluator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Union


class QuestionType(str, Enum):
    """Closed set of question types with an explicit fallback."""
    SINGLE_CHOICE = "single_choice"
    FILL_BLANK = "fill_blank"
    SHORT_ANSWER = "short_answer"
    CALCULATION = "calculation"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "QuestionType":
        """Map a stored type label onto a QuestionType, falling back to UNKNOWN."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNKNOWN

        label = str(value).strip()
        if label in _LABEL_ALIASES:
            return _LABEL_ALIASES[label]

        key = label.lower().replace('-', '_').replace(' ', '_')
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_partial_credit(self) -> bool:
        return self in (QuestionType.FILL_BLANK, QuestionType.SHORT_ANSWER, QuestionType.CALCULATION)


_LABEL_ALIASES = {
    "单选题": QuestionType.SINGLE_CHOICE,
    "选择题": QuestionType.SINGLE_CHOICE,
    "填空题": QuestionType.FILL_BLANK,
    "简答题": QuestionType.SHORT_ANSWER,
    "计算题": QuestionType.CALCULATION,
}


def normalize_difficulty(value: Any) -> int:
    """Difficulty as a positive integer; missing, zero or negative become 1."""
    try:
        difficulty = int(value)
    except (TypeError, ValueError):
        return 1
    return difficulty if difficulty > 0 else 1


@dataclass(frozen=True)
class Question:
    """A question definition as returned by the question catalog."""
    id: str
    question_type: QuestionType
    correct_answer: str
    difficulty: int = 1
    content: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'id', str(self.id))
        object.__setattr__(self, 'question_type', QuestionType.parse(self.question_type))
        object.__setattr__(self, 'correct_answer', "" if self.correct_answer is None else str(self.correct_answer))
        object.__setattr__(self, 'difficulty', normalize_difficulty(self.difficulty))


@dataclass(frozen=True)
class SubmittedAnswer:
    """One learner answer, possibly empty. The text is kept verbatim."""
    question_id: str
    raw_text: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'question_id', str(self.question_id))
        object.__setattr__(self, 'raw_text', "" if self.raw_text is None else str(self.raw_text))


Answers = Union[Mapping[str, Optional[str]], Iterable[SubmittedAnswer]]


def collect_answers(answers: Answers) -> Dict[str, SubmittedAnswer]:
    """
    Index a submission by question id.

    Accepts a mapping of question id to text or SubmittedAnswer objects. When
    a question id repeats, the last answer wins.
    """
    if isinstance(answers, Mapping):
        answers = [SubmittedAnswer(question_id, text) for question_id, text in answers.items()]
    return {answer.question_id: answer for answer in answers}


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one answer against one question."""
    question_id: str
    is_correct: bool
    accuracy: float
    awarded_score: int
    question_type: QuestionType = QuestionType.UNKNOWN
    base_score: int = 0
