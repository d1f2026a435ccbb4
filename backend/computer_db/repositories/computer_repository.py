"""Computer Repository — SQLAlchemy store for computer records.

Invariants:
    - count() and fetch() apply the same filter: case-insensitive substring match
      on computer name OR company name, optionally scoped to one company
    - fetch() orders by the OrderSpec keys (all in the requested direction),
      then by computer.id ascending, so the order is total
    - NULL keys (no company, unknown dates) sort last ascending and first
      descending, whatever the database's default placement
    - Reads outer-join company: computers without a company are listed too
    - Writes flush, never commit

Design Decisions:
    - Logical sort keys ("company.name") mapped to columns here, keeping the
      registry free of SQLAlchemy imports
    - update() and delete() use bulk statements and report rowcount, matching
      the boolean contract of the store protocol
"""

import logging

from sqlalchemy import Select, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from computer_db.core.domain_types import SortDirection
from computer_db.core.records import Computer
from computer_db.core.sort_columns import OrderSpec
from computer_db.models.company import Company as CompanyModel
from computer_db.models.computer import Computer as ComputerModel
from computer_db.repositories.rows import LIKE_ESCAPE, check_only_one, escape_like

logger = logging.getLogger(__name__)

_ORDER_FIELDS = {
    "computer.name": ComputerModel.name,
    "computer.introduced": ComputerModel.introduced,
    "computer.discontinued": ComputerModel.discontinued,
    "company.name": CompanyModel.name,
    "company.id": CompanyModel.id,
}

_COLUMNS = (
    ComputerModel.id,
    ComputerModel.name,
    ComputerModel.introduced,
    ComputerModel.discontinued,
    ComputerModel.company_id,
    CompanyModel.name.label("company_name"),
)


def _join_company(stmt: Select) -> Select:
    return stmt.outerjoin(CompanyModel, ComputerModel.company_id == CompanyModel.id)


def _apply_filter(
    stmt: Select, filter_text: str | None, company_id: int | None,
) -> Select:
    if filter_text:
        pattern = f"%{escape_like(filter_text)}%"
        stmt = stmt.where(or_(
            ComputerModel.name.ilike(pattern, escape=LIKE_ESCAPE),
            CompanyModel.name.ilike(pattern, escape=LIKE_ESCAPE),
        ))
    if company_id is not None:
        stmt = stmt.where(ComputerModel.company_id == company_id)
    return stmt


def _order_by(order: OrderSpec, direction: SortDirection) -> list:
    clauses = []
    for key in order.keys:
        column = _ORDER_FIELDS[key]
        if direction is SortDirection.DESC:
            clauses.append(column.desc().nulls_first())
        else:
            clauses.append(column.asc().nulls_last())
    clauses.append(ComputerModel.id.asc())
    return clauses


def _to_record(row) -> Computer:
    return Computer(
        id=row["id"],
        name=row["name"],
        introduced=row["introduced"],
        discontinued=row["discontinued"],
        company_id=row["company_id"],
        company_name=row["company_name"],
    )


class SqlComputerRepository:
    """ComputerRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def count(
        self, filter_text: str | None, company_id: int | None = None,
    ) -> int:
        stmt = _join_company(
            select(func.count(ComputerModel.id)).select_from(ComputerModel),
        )
        stmt = _apply_filter(stmt, filter_text, company_id)
        result = await self._db.execute(stmt)
        return int(result.scalar_one())

    async def fetch(
        self,
        filter_text: str | None,
        limit: int,
        offset: int,
        order: OrderSpec,
        direction: SortDirection,
        company_id: int | None = None,
    ) -> list[Computer]:
        stmt = _join_company(select(*_COLUMNS).select_from(ComputerModel))
        stmt = _apply_filter(stmt, filter_text, company_id)
        stmt = stmt.order_by(*_order_by(order, direction)).limit(limit).offset(offset)
        result = await self._db.execute(stmt)
        return [_to_record(row) for row in result.mappings().all()]

    async def get_by_id(self, computer_id: int) -> Computer | None:
        stmt = _join_company(select(*_COLUMNS).select_from(ComputerModel)).where(
            ComputerModel.id == computer_id,
        )
        result = await self._db.execute(stmt)
        row = check_only_one(result.mappings().all(), "get_computer", computer_id)
        return _to_record(row) if row is not None else None

    async def insert(self, computer: Computer) -> Computer:
        model = ComputerModel(
            name=computer.name,
            introduced=computer.introduced,
            discontinued=computer.discontinued,
            company_id=computer.company_id,
        )
        self._db.add(model)
        await self._db.flush()
        return computer.with_id(model.id)

    async def update(self, computer: Computer) -> bool:
        result = await self._db.execute(
            update(ComputerModel)
            .where(ComputerModel.id == computer.id)
            .values(
                name=computer.name,
                introduced=computer.introduced,
                discontinued=computer.discontinued,
                company_id=computer.company_id,
            )
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1

    async def delete(self, computer_id: int) -> bool:
        result = await self._db.execute(
            delete(ComputerModel)
            .where(ComputerModel.id == computer_id)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1

    async def delete_many(self, computer_ids: list[int]) -> int:
        if not computer_ids:
            return 0
        result = await self._db.execute(
            delete(ComputerModel)
            .where(ComputerModel.id.in_(computer_ids))
            .execution_options(synchronize_session=False),
        )
        return result.rowcount

    async def delete_by_company_id(self, company_id: int) -> int:
        result = await self._db.execute(
            delete(ComputerModel)
            .where(ComputerModel.company_id == company_id)
            .execution_options(synchronize_session=False),
        )
        logger.info(
            f"Deleted {result.rowcount} computer(s) of company {company_id}",
            extra={"entity_id": company_id},
        )
        return result.rowcount
