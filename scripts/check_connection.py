#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the configured database is reachable and the schema exists.
Usage: python scripts/check_connection.py
"""
import sys
sys.path.insert(0, '.')

from sqlalchemy import inspect

from job_portal.core.config import get_settings
from job_portal.db.database import engine, check_db_connection
from job_portal.db.schema import TABLES


def main():
    settings = get_settings()
    print("=" * 50)
    print("JOB PORTAL - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Testing database...")
    print(f"    URL: {engine.url.render_as_string(hide_password=True)}")
    if not check_db_connection():
        print("    FAILED: database unreachable")
        return 1
    print("    OK: connected")

    print("\n[2] Checking tables...")
    existing = set(inspect(engine).get_table_names())
    missing = [table for table in TABLES if table not in existing]
    for table in TABLES:
        print(f"    {'ok     ' if table in existing else 'MISSING'} {table}")
    if missing:
        print("    Start the API once (or run scripts/seed_db.py) to create them.")

    print("\n[3] Token settings...")
    print(f"    Algorithm: {settings.jwt_algorithm}, expiry: {settings.jwt_expire_minutes} min")
    if settings.jwt_secret_key == "change-this-secret":
        print("    WARNING: JWT_SECRET_KEY is the default value")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
