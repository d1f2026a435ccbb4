"""Company Service — company lookups, listing, and cascading delete.

Invariants:
    - delete() removes the company's computers and the company in ONE unit of
      work: either both removals commit or neither does
    - A failure in either step rolls back and surfaces as AccessError
    - get() returns None for a missing company; exists() is its boolean form
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from computer_db.core.enforce_requests import (
    check_company_for_delete,
    check_positive_id,
    fits_id_column,
    missing_company,
)
from computer_db.core.errors import InvalidArgumentError
from computer_db.core.paging import Page, QueryRequest
from computer_db.core.records import Company
from computer_db.core.repository_protocols import CompanyRepository, ComputerRepository
from computer_db.infrastructure.database import unit_of_work
from computer_db.services.listing import fetch_page, raise_if

logger = logging.getLogger(__name__)


class CompanyService:
    """Entry point for every company read and the company delete cascade."""

    def __init__(
        self,
        db: AsyncSession,
        companies: CompanyRepository,
        computers: ComputerRepository,
    ) -> None:
        self._db = db
        self._companies = companies
        self._computers = computers

    async def get(self, company_id: int) -> Company | None:
        raise_if(check_positive_id(company_id))
        if not fits_id_column(company_id):
            return None
        async with unit_of_work(self._db, "get_company"):
            return await self._companies.get_by_id(company_id)

    async def exists(self, company_id: int) -> bool:
        return await self.get(company_id) is not None

    async def list(self, request: QueryRequest | None) -> Page[Company]:
        """Page through companies by name. Filter and sort fields are ignored."""
        async with unit_of_work(self._db, "list_companies"):
            return await fetch_page(request, self._companies.count, self._companies.fetch)

    async def delete(self, company: Company | None) -> None:
        """Delete a company together with every computer referencing it."""
        raise_if(check_company_for_delete(company))
        async with unit_of_work(self._db, "delete_company"):
            if await self._companies.get_by_id(company.id) is None:
                raise InvalidArgumentError(missing_company(company.id))
            removed = await self._computers.delete_by_company_id(company.id)
            await self._companies.delete(company.id)
        logger.info(
            f"Company {company.id} deleted with {removed} computer(s)",
            extra={"entity_id": company.id},
        )
