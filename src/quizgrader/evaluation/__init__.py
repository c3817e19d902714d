"""
Evaluation Module

Answer matching strategies, score calculation, submission evaluation,
result aggregation and audit record building.
"""

from .types import QuestionType, Question, SubmittedAnswer, EvaluationResult, collect_answers
from .matcher import MatchResult, MatchType, match_answer, STRATEGIES
from .scoring import ScoreCalculator, round_half_up
from .evaluator import SubmissionEvaluator, requested_ids
from .metrics import ResultAggregator, SubmissionSummary, TypeBreakdown
from .records import AnswerRecord, AnswerRecordBuilder, RecordBatch

__all__ = [
    "QuestionType",
    "Question",
    "SubmittedAnswer",
    "EvaluationResult",
    "collect_answers",
    "MatchResult",
    "MatchType",
    "match_answer",
    "STRATEGIES",
    "ScoreCalculator",
    "round_half_up",
    "SubmissionEvaluator",
    "requested_ids",
    "ResultAggregator",
    "SubmissionSummary",
    "TypeBreakdown",
    "AnswerRecord",
    "AnswerRecordBuilder",
    "RecordBatch",
]
