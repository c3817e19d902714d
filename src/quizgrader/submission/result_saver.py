"""
Result Saver Module

Fans out answer record writes to the answer store, one independent task per
record, and collects every failure instead of stopping at the first.
"""

from typing import List, Optional, Sequence

from ..core.config import get_config, PersistenceConfig
from ..evaluation.records import AnswerRecord
from ..storage.base import AnswerStore
from ..utils.async_helpers import call_maybe_async, gather_settled
from ..utils.logging import get_logger
from .types import PersistenceFailure

logger = get_logger(__name__)


class ResultSaver:
    """Persists answer records with join-all semantics."""

    def __init__(self, store: AnswerStore, config: Optional[PersistenceConfig] = None):
        """
        Initialize the result saver.

        Args:
            store: Answer store receiving one insert per record
            config: Persistence settings (uses the application config if None)
        """
        self.store = store
        self.config = config or get_config().persistence

    async def save_records(self, records: Sequence[AnswerRecord]) -> List[PersistenceFailure]:
        """
        Write every record and wait for all writes to settle.

        Returns:
            One PersistenceFailure per record that could not be written
        """
        if not records:
            return []

        tasks = [self._insert_task(record) for record in records]
        outcomes = await gather_settled(tasks, max_concurrent=self.config.max_concurrent_writes)

        failures = []
        for record, outcome in zip(records, outcomes):
            if outcome.ok:
                continue
            logger.error(
                f"Failed to persist answer record for question {record.question_id}: {outcome.error}",
                extra={'submission_id': record.submission_id, 'question_id': record.question_id}
            )
            failures.append(PersistenceFailure(
                question_id=record.question_id,
                submission_id=record.submission_id,
                reason=str(outcome.error),
                record=record,
            ))

        logger.info(f"Persisted {len(records) - len(failures)}/{len(records)} answer records")
        return failures

    def _insert_task(self, record: AnswerRecord):
        async def insert():
            await call_maybe_async(self.store.insert, record)
        return insert
