"""
Submission Evaluator

Selects a matching strategy per question and evaluates a batch of submitted
answers against the questions resolved from the catalog.
"""

from typing import List, Optional, Sequence, Set

from ..core.config import GradingConfig, get_config
from ..core.exceptions import InvalidInputError, NotFoundError
from ..utils.logging import get_logger
from .matcher import match_answer
from .scoring import ScoreCalculator
from .types import Answers, EvaluationResult, Question, collect_answers

logger = get_logger(__name__)


def requested_ids(answers: Answers) -> Set[str]:
    """Question ids to resolve from the catalog for a submission."""
    return set(collect_answers(answers))


class SubmissionEvaluator:
    """Evaluates submitted answers question by question."""

    def __init__(self, config: Optional[GradingConfig] = None):
        """
        Initialize the evaluator.

        Args:
            config: Grading rules (uses the application config if None)
        """
        self.config = config or get_config().grading
        self.calculator = ScoreCalculator(self.config)

    def evaluate_answer(self, question: Question, submitted: Optional[str]) -> EvaluationResult:
        """Evaluate a single answer. Deterministic for a given question and text."""
        match = match_answer(question.question_type, submitted, question.correct_answer, self.config)
        base_score = self.calculator.base_score(question.question_type, question.difficulty)
        awarded = self.calculator.awarded_score(
            question.question_type, base_score, match.is_match, match.accuracy
        )

        return EvaluationResult(
            question_id=question.id,
            is_correct=match.is_match,
            accuracy=match.accuracy,
            awarded_score=awarded,
            question_type=question.question_type,
            base_score=base_score,
        )

    def evaluate(self, questions: Sequence[Question],
                 answers: Answers) -> List[EvaluationResult]:
        """
        Evaluate a batch of answers.

        Args:
            questions: Questions resolved for the submission, in catalog order
            answers: Mapping of question id to submitted text, or SubmittedAnswers

        Returns:
            One EvaluationResult per question, in the order of ``questions``

        Raises:
            InvalidInputError: If ``answers`` is empty
            NotFoundError: If no questions were resolved
        """
        submitted = collect_answers(answers)
        if not submitted:
            raise InvalidInputError("Submission contains no answers", field_name="answers")

        if not questions:
            raise NotFoundError("No questions found for submission", question_ids=set(submitted))

        missing = set(submitted) - {q.id for q in questions}
        if missing:
            logger.warning(f"Ignoring answers for unknown questions: {sorted(missing)}")

        results = [
            self.evaluate_answer(q, submitted[q.id].raw_text if q.id in submitted else "")
            for q in questions
        ]

        logger.debug(f"Evaluated {len(results)} answers: {sum(1 for r in results if r.is_correct)} correct")
        return results
