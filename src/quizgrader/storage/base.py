"""
Storage Protocols

Capabilities the submission runner depends on. Implementations are injected,
so SQL-backed repositories and in-memory fakes are interchangeable.
"""

from typing import List, Protocol, Set, runtime_checkable

from ..evaluation.records import AnswerRecord
from ..evaluation.types import Question


@runtime_checkable
class QuestionCatalog(Protocol):
    """Read-only lookup of question definitions."""

    def get_by_ids(self, ids: Set[str]) -> List[Question]:
        """
        Return the questions whose ids are in ``ids``.

        An empty list is a valid answer. Lookup failures raise
        CatalogUnavailableError.
        """
        ...


@runtime_checkable
class AnswerStore(Protocol):
    """Write-once storage of answer records."""

    def insert(self, record: AnswerRecord) -> None:
        """Persist one record, raising PersistenceError on failure."""
        ...
