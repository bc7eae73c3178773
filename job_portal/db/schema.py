"""
Relational schema - five tables, created idempotently at startup.

No migration system: every statement is CREATE ... IF NOT EXISTS, so running
init_schema() against an existing database is a no-op.

The DDL sticks to types and syntax that SQLite and PostgreSQL both accept.
"""

import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

# Referenced by tests and the seeder when clearing data (children first)
TABLES: List[str] = [
    "applications",
    "jobs",
    "student_profiles",
    "employee_profiles",
    "users",
]

_ID = "INTEGER PRIMARY KEY AUTOINCREMENT"


def _statements(dialect: str) -> List[str]:
    pk = "SERIAL PRIMARY KEY" if dialect == "postgresql" else _ID
    return [
        f"""
        CREATE TABLE IF NOT EXISTS users (
            id {pk},
            email VARCHAR(255) NOT NULL UNIQUE,
            password_hash VARCHAR(255) NOT NULL,
            role VARCHAR(20) NOT NULL CHECK (role IN ('employee', 'student')),
            token_version INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS employee_profiles (
            id {pk},
            user_id INTEGER NOT NULL UNIQUE REFERENCES users (id) ON DELETE CASCADE,
            company_name VARCHAR(200) NOT NULL,
            contact_person VARCHAR(200) NOT NULL,
            industry VARCHAR(100) NOT NULL
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS student_profiles (
            id {pk},
            user_id INTEGER NOT NULL UNIQUE REFERENCES users (id) ON DELETE CASCADE,
            first_name VARCHAR(100) NOT NULL,
            last_name VARCHAR(100) NOT NULL,
            university VARCHAR(200) NOT NULL,
            qualifications TEXT,
            experience TEXT
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS jobs (
            id {pk},
            employer_id INTEGER NOT NULL REFERENCES users (id),
            title VARCHAR(200) NOT NULL,
            description TEXT NOT NULL,
            job_type VARCHAR(50) NOT NULL,
            industry VARCHAR(100) NOT NULL,
            location VARCHAR(200),
            requirements TEXT,
            salary VARCHAR(100),
            external_application_link VARCHAR(500),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS applications (
            id {pk},
            job_id INTEGER NOT NULL REFERENCES jobs (id) ON DELETE CASCADE,
            student_id INTEGER NOT NULL REFERENCES users (id),
            status VARCHAR(20) NOT NULL DEFAULT 'pending',
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT uq_application_job_student UNIQUE (job_id, student_id)
        )
        """,
        "CREATE INDEX IF NOT EXISTS ix_jobs_employer_id ON jobs (employer_id)",
        "CREATE INDEX IF NOT EXISTS ix_jobs_created_at ON jobs (created_at)",
        "CREATE INDEX IF NOT EXISTS ix_applications_student_id ON applications (student_id)",
    ]


def init_schema(engine: Engine) -> None:
    """Create all tables and indexes if they do not exist."""
    with engine.begin() as connection:
        for statement in _statements(engine.dialect.name):
            connection.execute(text(statement))
    logger.info("Database schema ready (%s)", engine.dialect.name)


def clear_all(engine: Engine) -> None:
    """Delete every row from every table. Used by tests and the seeder."""
    with engine.begin() as connection:
        for table in TABLES:
            connection.execute(text(f"DELETE FROM {table}"))
