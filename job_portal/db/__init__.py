"""
Database module - SQLAlchemy engine, sessions and schema.
"""
from job_portal.db.database import (
    engine,
    get_db_session,
    execute_raw_sql,
    check_db_connection,
)
from job_portal.db.schema import init_schema

__all__ = [
    "engine",
    "get_db_session",
    "execute_raw_sql",
    "check_db_connection",
    "init_schema",
]
