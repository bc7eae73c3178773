"""
Job Portal
REST backend for a part-time / internship job board.

Architecture:
- Relational store (SQLite by default, PostgreSQL by URL): users, profiles, jobs, applications
- FastAPI routers under /api, raw parameterized SQL per request
- JWT bearer tokens for employees (job posters) and students (applicants)
"""

__version__ = "1.0.0"
