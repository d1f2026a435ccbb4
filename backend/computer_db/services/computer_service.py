"""Computer Service — listing and validate-then-persist for computer records.

Invariants:
    - Every public method runs in exactly one unit of work (commit or rollback)
    - Preconditions are checked by pure core functions; this shell raises
      InvalidArgumentError carrying the returned Violation
    - get() returns None for a missing record (absence, not an error), also
      for ids beyond the id column range
    - update()/delete() require the id to resolve to an existing record
    - A non-null company_id must reference an existing company
    - Store failures surface as AccessError (mapped by unit_of_work)

Design Decisions:
    - Repositories injected at construction (no module-level service instance)
    - The session is injected too: it is the transactional boundary
    - list() is declared last so it does not shadow the builtin in the
      annotations of the other methods
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from computer_db.core.enforce_requests import (
    check_computer_for_delete,
    check_computer_for_insert,
    check_computer_for_update,
    check_id,
    check_ids,
    check_positive_id,
    check_query_request,
    fits_id_column,
    missing_company_reference,
    missing_computer,
    normalize_filter,
)
from computer_db.core.errors import InvalidArgumentError
from computer_db.core.paging import Page, QueryRequest
from computer_db.core.records import Computer
from computer_db.core.repository_protocols import CompanyRepository, ComputerRepository
from computer_db.core.sort_columns import lookup_order
from computer_db.infrastructure.database import unit_of_work
from computer_db.services.listing import fetch_page, raise_if

logger = logging.getLogger(__name__)


class ComputerService:
    """Entry point for every computer read and write."""

    def __init__(
        self,
        db: AsyncSession,
        computers: ComputerRepository,
        companies: CompanyRepository,
    ) -> None:
        self._db = db
        self._computers = computers
        self._companies = companies

    async def get(self, computer_id: int) -> Computer | None:
        raise_if(check_positive_id(computer_id))
        if not fits_id_column(computer_id):
            return None
        async with unit_of_work(self._db, "get_computer"):
            return await self._computers.get_by_id(computer_id)

    async def insert(self, computer: Computer | None) -> Computer:
        """Persist a new computer and return it with its store-assigned id."""
        raise_if(check_computer_for_insert(computer))
        async with unit_of_work(self._db, "insert_computer"):
            await self._check_company_reference(computer)
            created = await self._computers.insert(computer)
        logger.info(f"Computer {created.id} created", extra={"entity_id": created.id})
        return created

    async def update(self, computer: Computer | None) -> Computer:
        """Replace every mutable field of an existing computer."""
        raise_if(check_computer_for_update(computer))
        async with unit_of_work(self._db, "update_computer"):
            await self._check_exists(computer.id)
            await self._check_company_reference(computer)
            await self._computers.update(computer)
        logger.info(f"Computer {computer.id} updated", extra={"entity_id": computer.id})
        return computer

    async def delete(self, computer: Computer | None) -> None:
        raise_if(check_computer_for_delete(computer))
        async with unit_of_work(self._db, "delete_computer"):
            await self._check_exists(computer.id)
            await self._computers.delete(computer.id)
        logger.info(f"Computer {computer.id} deleted", extra={"entity_id": computer.id})

    async def delete_many(self, computer_ids: list[int]) -> int:
        """Delete a selection of computers at once. Unknown ids are skipped."""
        if not computer_ids:
            return 0
        raise_if(check_ids(computer_ids))
        async with unit_of_work(self._db, "delete_computers"):
            deleted = await self._computers.delete_many(computer_ids)
        logger.info(f"Deleted {deleted} computer(s)")
        return deleted

    async def delete_by_company_id(self, company_id: int) -> int:
        """Remove every computer referencing a company.

        CompanyService.delete() calls the repository inside its own unit of
        work instead, so that both removals commit together.
        """
        raise_if(check_id(company_id, "company_id"))
        async with unit_of_work(self._db, "delete_computers_by_company"):
            return await self._computers.delete_by_company_id(company_id)

    async def _check_exists(self, computer_id: int) -> None:
        if await self._computers.get_by_id(computer_id) is None:
            raise InvalidArgumentError(missing_computer(computer_id))

    async def _check_company_reference(self, computer: Computer) -> None:
        if computer.company_id is None:
            return
        if await self._companies.get_by_id(computer.company_id) is None:
            raise InvalidArgumentError(missing_company_reference(computer.company_id))

    async def list(self, request: QueryRequest | None) -> Page[Computer]:
        """Return one page of computers matching the request."""
        raise_if(check_query_request(request))
        filter_text = normalize_filter(request.filter_text)
        order = lookup_order(request.sort_column)

        async def count() -> int:
            return await self._computers.count(filter_text, request.company_id)

        async def fetch(limit: int, offset: int) -> list[Computer]:
            return await self._computers.fetch(
                filter_text, limit, offset, order,
                request.sort_direction, request.company_id,
            )

        async with unit_of_work(self._db, "list_computers"):
            return await fetch_page(request, count, fetch)
