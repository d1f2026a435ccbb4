"""Repositories — SQLAlchemy implementations of the core store protocols.

Invariants:
    - Repositories flush but never commit (the service owns the transaction)
    - Repositories return core records, never ORM instances
"""
