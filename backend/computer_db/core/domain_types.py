"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ComputerId, CompanyId wrap positive ints; records and store contracts use them
    - SortColumn is a closed set: exactly five orderable fields
    - SortDirection is ASC | DESC, nothing else

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and query strings without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ComputerId = NewType("ComputerId", int)
CompanyId = NewType("CompanyId", int)


# ─── Enums ───────────────────────────────────────────────────────

class SortColumn(str, Enum):
    """Orderable computer fields. Values are the query-string spelling."""
    NAME = "name"
    INTRODUCED = "introduced"
    DISCONTINUED = "discontinued"
    COMPANY_NAME = "company_name"
    COMPANY_ID = "company_id"


class SortDirection(str, Enum):
    """Ordering direction applied to a sort column."""
    ASC = "asc"
    DESC = "desc"
