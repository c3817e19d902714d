"""
Database Model Mixins

Shared mixin classes for SQLAlchemy models.
"""

from datetime import datetime, timezone
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column


def _utc_now_str() -> str:
    return datetime.now(timezone.utc).isoformat()


class StringTimestampMixin:
    """Mixin for models that store ISO-8601 string timestamps."""

    created_at: Mapped[str] = mapped_column(String, nullable=False, default=_utc_now_str)
    updated_at: Mapped[str] = mapped_column(String, nullable=False, default=_utc_now_str, onupdate=_utc_now_str)
