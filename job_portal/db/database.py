import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from contextlib import contextmanager
from job_portal.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

if settings.is_sqlite:
    # SQLite connections are shared across FastAPI's threadpool workers
    engine_kwargs = {"connect_args": {"check_same_thread": False}}
else:
    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    engine_kwargs = {"pool_size": 5, "max_overflow": 10, "pool_pre_ping": True}

engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,  # Log SQL queries
    **engine_kwargs
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.

    Everything inside the block is one transaction: committed on success,
    rolled back if anything raises (HTTP errors included).

    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM users"))
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def check_db_connection() -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except SQLAlchemyError as e:
        logger.error("Database connection failed: %s", e)
        return False


def rows_to_dicts(result) -> list:
    """Convert a result set into a list of plain dicts keyed by column name."""
    columns = list(result.keys())
    return [dict(zip(columns, row)) for row in result.fetchall()]


def execute_raw_sql(sql: str, params: dict = None, db: Session = None) -> list:
    """
    Execute raw SQL and return results as list of dicts.

    Pass ``db`` to run inside an existing transaction, otherwise a
    short-lived session is opened.
    """
    if db is not None:
        return rows_to_dicts(db.execute(text(sql), params or {}))
    with get_db_session() as session:
        return rows_to_dicts(session.execute(text(sql), params or {}))
