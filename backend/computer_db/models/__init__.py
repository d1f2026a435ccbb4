"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Company owns computers through computers.company_id (nullable FK)

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from computer_db.models.company import Company  # noqa: F401
from computer_db.models.computer import Computer  # noqa: F401
