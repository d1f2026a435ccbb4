"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Every model inherits Base; Alembic reads Base.metadata
    - Engines and sessions live in infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for SQLite (tests, local runs)
"""
