"""Records — immutable domain values exchanged between services and stores.

Invariants:
    - Computer.id is None until the store assigns one on insert
    - Computer.company_name is read-only: resolved by the store on reads, ignored on writes
    - No ordering constraint between introduced and discontinued

Design Decisions:
    - Frozen dataclasses over ORM objects: services never see session-bound state
    - with_id() returns a new record instead of mutating (records are values)
"""

from dataclasses import dataclass, replace
from datetime import date

from computer_db.core.domain_types import CompanyId, ComputerId


@dataclass(frozen=True)
class Company:
    id: CompanyId
    name: str


@dataclass(frozen=True)
class Computer:
    name: str
    id: ComputerId | None = None
    introduced: date | None = None
    discontinued: date | None = None
    company_id: CompanyId | None = None
    company_name: str | None = None

    def with_id(self, computer_id: ComputerId) -> "Computer":
        return replace(self, id=computer_id)
