"""
Core Module

Foundational components used across the application including configuration
management, database connections, and custom exceptions.
"""

from .config import get_config, set_config, AppConfig, GradingConfig
from .exceptions import (
    QuizGraderException,
    ConfigurationError,
    DatabaseError,
    InvalidInputError,
    NotFoundError,
    CatalogUnavailableError,
    PersistenceError,
)

__all__ = [
    "get_config",
    "set_config",
    "AppConfig",
    "GradingConfig",
    "QuizGraderException",
    "ConfigurationError",
    "DatabaseError",
    "InvalidInputError",
    "NotFoundError",
    "CatalogUnavailableError",
    "PersistenceError",
]
