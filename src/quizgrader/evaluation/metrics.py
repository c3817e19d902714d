"""
Result Aggregator

Tallies correct and wrong answers, total and maximum score, percentage and a
per-question-type breakdown for one evaluated submission.
"""

from collections import defaultdict
from dataclasses import dataclass, field, asdict
from fractions import Fraction
from typing import Dict, Any, Sequence

from ..core.exceptions import NotFoundError
from .scoring import round_half_up
from .types import EvaluationResult


@dataclass
class TypeBreakdown:
    """Counts for one question type within a submission."""
    total: int = 0
    correct: int = 0
    score: int = 0
    max_score: int = 0


@dataclass
class SubmissionSummary:
    """Aggregated outcome of one submission."""
    submission_id: str
    user_id: str
    timestamp: str
    total_score: int
    percentage_score: int
    total_questions: int
    correct_count: int
    wrong_count: int
    max_score: int = 0
    by_type: Dict[str, TypeBreakdown] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ResultAggregator:
    """Builds a SubmissionSummary from a batch of evaluation results."""

    def aggregate(self, results: Sequence[EvaluationResult], submission_id: str,
                  user_id: str, timestamp: str) -> SubmissionSummary:
        """
        Aggregate evaluation results.

        Args:
            results: Evaluation results of the batch
            submission_id: Identifier shared by the batch's answer records
            user_id: Learner identifier
            timestamp: ISO-8601 timestamp of the submission

        Returns:
            SubmissionSummary with counts, scores and percentage
        """
        if not results:
            raise NotFoundError("Cannot aggregate an empty submission")

        total = len(results)
        correct = sum(1 for r in results if r.is_correct)

        return SubmissionSummary(
            submission_id=submission_id,
            user_id=user_id,
            timestamp=timestamp,
            total_score=sum(r.awarded_score for r in results),
            percentage_score=self.percentage(correct, total),
            total_questions=total,
            correct_count=correct,
            wrong_count=total - correct,
            max_score=sum(r.base_score for r in results),
            by_type=self._breakdown(results),
        )

    @staticmethod
    def percentage(correct: int, total: int) -> int:
        return round_half_up(Fraction(100 * correct, total))

    @staticmethod
    def _breakdown(results: Sequence[EvaluationResult]) -> Dict[str, TypeBreakdown]:
        by_type: Dict[str, TypeBreakdown] = defaultdict(TypeBreakdown)

        for result in results:
            entry = by_type[result.question_type.value]
            entry.total += 1
            entry.correct += int(result.is_correct)
            entry.score += result.awarded_score
            entry.max_score += result.base_score

        return dict(by_type)
