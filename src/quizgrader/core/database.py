"""
Database Connection and Session Management

SQLAlchemy database connection, session management, and schema creation
for the question catalog and answer record tables.
"""

from typing import Optional
from pathlib import Path
from sqlalchemy import create_engine, Engine, text, inspect
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import get_config, DatabaseConfig
from .exceptions import DatabaseError
from ..utils.logging import get_logger

logger = get_logger(__name__)

# SQLAlchemy declarative base for ORM models
Base = declarative_base()

# Global engine and session factory
_engine: Optional[Engine] = None
SessionFactory: Optional[sessionmaker] = None

REQUIRED_TABLES = ("questions", "answer_records")


def get_engine() -> Engine:
    """Get or create the SQLAlchemy engine."""
    global _engine

    if _engine is None:
        config = get_config()
        logger.info(f"Creating database engine with URL: {config.database.url}")

        try:
            _engine = create_engine_for(config.database)
        except Exception as e:
            raise DatabaseError(
                f"Failed to create database engine: {str(e)}",
                operation="create_engine",
                url=config.database.url
            ) from e

    return _engine


def create_engine_for(database: DatabaseConfig) -> Engine:
    """Create an engine configured for the scheme of ``database.url``."""
    if is_sqlite_url(database.url):
        return _create_sqlite_engine(database)
    return _create_generic_engine(database)


def is_sqlite_url(url: str) -> bool:
    return url.startswith('sqlite')


def _create_sqlite_engine(database: DatabaseConfig) -> Engine:
    """Create a SQLAlchemy engine for SQLite databases."""
    url = database.url
    connect_args = {
        'check_same_thread': False,  # Allow SQLite to be used across threads
        'timeout': 20,
    }

    if url in ('sqlite://', 'sqlite:///:memory:'):
        # An in-memory database only lives as long as its single connection
        return create_engine(url, echo=database.echo, poolclass=StaticPool,
                             connect_args=connect_args)

    db_path = url.split(':///', 1)[-1]
    if db_path:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(url, echo=database.echo, connect_args=connect_args)


def _create_generic_engine(database: DatabaseConfig) -> Engine:
    """Create a SQLAlchemy engine for generic databases (PostgreSQL, etc.)."""
    return create_engine(
        database.url,
        echo=database.echo,
        pool_size=database.pool_size,
    )


def get_session_factory() -> sessionmaker:
    """Get or create the SQLAlchemy session factory."""
    global SessionFactory

    if SessionFactory is None:
        SessionFactory = sessionmaker(bind=get_engine(), expire_on_commit=False)

    return SessionFactory


def create_tables(engine: Optional[Engine] = None) -> None:
    """Create all database tables."""
    engine = engine or get_engine()

    try:
        # Import models to register them with Base metadata
        from ..storage.models import QuestionModel, AnswerRecordModel  # noqa: F401

        Base.metadata.create_all(engine)

        tables = inspect(engine).get_table_names()
        missing_tables = [t for t in REQUIRED_TABLES if t not in tables]
        if missing_tables:
            raise DatabaseError(f"Failed to create required tables: {missing_tables}")

        logger.info(f"All required tables created successfully: {list(REQUIRED_TABLES)}")

    except DatabaseError:
        raise
    except Exception as e:
        raise DatabaseError(
            f"Failed to create database tables: {str(e)}",
            operation="create_tables"
        ) from e


def drop_tables(engine: Optional[Engine] = None) -> None:
    """Drop all database tables (useful for testing)."""
    try:
        Base.metadata.drop_all(engine or get_engine())
    except Exception as e:
        raise DatabaseError(
            f"Failed to drop database tables: {str(e)}",
            operation="drop_tables"
        ) from e


def check_database_connection() -> bool:
    """Check if database connection is working."""
    try:
        with get_engine().connect() as conn:
            row = conn.execute(text("SELECT 1")).fetchone()
            return row is not None and row[0] == 1
    except Exception as e:
        raise DatabaseError(
            f"Database connection check failed: {str(e)}",
            operation="connection_check"
        ) from e


def close_connections() -> None:
    """Close all database connections (useful for testing and cleanup)."""
    global _engine, SessionFactory

    if _engine:
        _engine.dispose()
        _engine = None

    SessionFactory = None
