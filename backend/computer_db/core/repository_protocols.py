"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Store methods never commit: the service owns the unit of work

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure checks that guard
      these calls are never async themselves
"""

from typing import Protocol

from computer_db.core.domain_types import CompanyId, ComputerId, SortDirection
from computer_db.core.records import Company, Computer
from computer_db.core.sort_columns import OrderSpec


class ComputerRepository(Protocol):
    """Contract for computer persistence — implemented by shell."""
    async def count(
        self, filter_text: str | None, company_id: CompanyId | None = None,
    ) -> int: ...
    async def fetch(
        self,
        filter_text: str | None,
        limit: int,
        offset: int,
        order: OrderSpec,
        direction: SortDirection,
        company_id: CompanyId | None = None,
    ) -> list[Computer]: ...
    async def get_by_id(self, computer_id: ComputerId) -> Computer | None: ...
    async def insert(self, computer: Computer) -> Computer: ...
    async def update(self, computer: Computer) -> bool: ...
    async def delete(self, computer_id: ComputerId) -> bool: ...
    async def delete_many(self, computer_ids: list[ComputerId]) -> int: ...
    async def delete_by_company_id(self, company_id: CompanyId) -> int: ...


class CompanyRepository(Protocol):
    """Contract for company persistence — implemented by shell."""
    async def count(self) -> int: ...
    async def fetch(self, limit: int, offset: int) -> list[Company]: ...
    async def get_by_id(self, company_id: CompanyId) -> Company | None: ...
    async def delete(self, company_id: CompanyId) -> bool: ...
