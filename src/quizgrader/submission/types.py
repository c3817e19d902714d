"""
Submission Types

Result types of a submission run: the computed summary, its answer records
and any per-record persistence failures.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..evaluation.metrics import SubmissionSummary
from ..evaluation.records import AnswerRecord
from ..evaluation.types import EvaluationResult


@dataclass(frozen=True)
class PersistenceFailure:
    """An answer record that could not be written."""
    question_id: str
    submission_id: str
    reason: str
    record: Optional[AnswerRecord] = None


@dataclass
class SubmissionOutcome:
    """Complete result of evaluating one submission."""
    summary: SubmissionSummary
    records: List[AnswerRecord]
    failures: List[PersistenceFailure] = field(default_factory=list)
    results: List[EvaluationResult] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True when some answer records were not persisted."""
        return bool(self.failures)

    @property
    def failed_question_ids(self) -> List[str]:
        return [f.question_id for f in self.failures]

    def as_tuple(self):
        return self.summary, self.records, self.failures
