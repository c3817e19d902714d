"""
Answer Record Builder

Produces the persistable audit rows of a submission: one per answered
question, all sharing a generated submission id and timestamp.
"""

import uuid
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Callable, Dict, List, Sequence, Any

from .types import Answers, EvaluationResult, SubmittedAnswer, collect_answers


def new_submission_id() -> str:
    """128-bit random submission identifier."""
    return uuid.uuid4().hex


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class AnswerRecord:
    """Audit row for one answered question."""
    submission_id: str
    timestamp: str
    user_id: str
    question_id: str
    input_answer: str
    accuracy: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecordBatch:
    """Answer records of one submission and the identifiers they share."""
    submission_id: str
    timestamp: str
    records: List[AnswerRecord]


class AnswerRecordBuilder:
    """Builds AnswerRecords for an evaluated batch."""

    def __init__(self,
                 id_factory: Callable[[], str] = new_submission_id,
                 clock: Callable[[], str] = utc_timestamp):
        self.id_factory = id_factory
        self.clock = clock

    def build(self, user_id: str, results: Sequence[EvaluationResult],
              answers: Answers) -> RecordBatch:
        """
        Build one record per evaluation result.

        The submitted text is stored verbatim; unanswered questions are
        recorded with an empty string.
        """
        submission_id = self.id_factory()
        timestamp = self.clock()
        submitted = collect_answers(answers)

        records = [
            AnswerRecord(
                submission_id=submission_id,
                timestamp=timestamp,
                user_id=user_id,
                question_id=result.question_id,
                input_answer=submitted.get(result.question_id, SubmittedAnswer(result.question_id)).raw_text,
                accuracy=result.accuracy,
            )
            for result in results
        ]

        return RecordBatch(submission_id=submission_id, timestamp=timestamp, records=records)
