"""
Submission Runner Core

Main orchestrator for grading a submission. Coordinates catalog lookup,
answer evaluation, score aggregation, audit record building and record
persistence.
"""

import asyncio
from typing import List, Optional, Sequence

from ..core.config import AppConfig, get_config
from ..core.exceptions import CatalogUnavailableError, InvalidInputError, QuizGraderException
from ..evaluation.evaluator import SubmissionEvaluator, requested_ids
from ..evaluation.metrics import ResultAggregator
from ..evaluation.records import AnswerRecord, AnswerRecordBuilder
from ..evaluation.types import Answers, Question, collect_answers
from ..storage.base import AnswerStore, QuestionCatalog
from ..utils.async_helpers import call_maybe_async
from ..utils.logging import get_logger, get_submission_logger, PerformanceTimer
from .result_saver import ResultSaver
from .types import PersistenceFailure, SubmissionOutcome

logger = get_logger(__name__)


class SubmissionRunner:
    """Grades submissions against an injected catalog and answer store."""

    def __init__(self,
                 catalog: QuestionCatalog,
                 store: AnswerStore,
                 config: Optional[AppConfig] = None,
                 record_builder: Optional[AnswerRecordBuilder] = None):
        """
        Initialize the submission runner.

        Args:
            catalog: Question lookup used by :meth:`submit`
            store: Destination of answer records
            config: Application configuration (uses get_config() if None)
            record_builder: Builder for audit rows (default generates UUIDs)
        """
        self.config = config or get_config()
        self.catalog = catalog
        self.store = store

        self.evaluator = SubmissionEvaluator(self.config.grading)
        self.aggregator = ResultAggregator()
        self.record_builder = record_builder or AnswerRecordBuilder()
        self.result_saver = ResultSaver(store, self.config.persistence)

    async def submit(self, user_id: str, answers: Answers) -> SubmissionOutcome:
        """
        Resolve the answered questions from the catalog, then evaluate.

        Raises:
            InvalidInputError: If ``answers`` is empty
            NotFoundError: If the catalog knows none of the answered questions
            CatalogUnavailableError: If the catalog lookup fails
        """
        submitted = list(collect_answers(answers).values())
        if not submitted:
            raise InvalidInputError("Submission contains no answers", field_name="answers")

        questions = await self._lookup(requested_ids(submitted))
        return await self.evaluate(questions, submitted, user_id)

    async def evaluate(self, questions: Sequence[Question],
                       answers: Answers,
                       user_id: str) -> SubmissionOutcome:
        """
        Evaluate, aggregate and persist one submission.

        The returned summary is complete even when some records could not be
        written; those are listed in ``failures``.
        """
        answers = list(collect_answers(answers).values())
        with PerformanceTimer(f"evaluation of {len(answers)} answers for user {user_id}", logger):
            results = self.evaluator.evaluate(questions, answers)
            batch = self.record_builder.build(user_id, results, answers)
            summary = self.aggregator.aggregate(results, batch.submission_id, user_id, batch.timestamp)

        log = get_submission_logger(batch.submission_id, user_id)
        log.info(
            f"Scored {summary.correct_count}/{summary.total_questions} correct, "
            f"{summary.total_score} points ({summary.percentage_score}%)"
        )

        failures = await self.persist_records(batch.records)
        if failures:
            log.warning(f"{len(failures)} answer records were not persisted: "
                        f"{[f.question_id for f in failures]}")

        return SubmissionOutcome(summary=summary, records=batch.records,
                                 failures=failures, results=results)

    async def persist_records(self, records: Sequence[AnswerRecord]) -> List[PersistenceFailure]:
        """Write answer records; also usable to re-attempt earlier failures."""
        return await self.result_saver.save_records(records)

    def submit_sync(self, user_id: str, answers: Answers) -> SubmissionOutcome:
        """Blocking variant of :meth:`submit` for callers without an event loop."""
        return asyncio.run(self.submit(user_id, answers))

    async def _lookup(self, ids) -> List[Question]:
        try:
            questions = await call_maybe_async(self.catalog.get_by_ids, ids)
        except QuizGraderException:
            raise
        except Exception as e:
            raise CatalogUnavailableError(
                f"Question catalog lookup failed: {str(e)}",
                question_ids=ids
            ) from e

        logger.debug(f"Catalog resolved {len(questions)} of {len(ids)} requested questions")
        return list(questions)
