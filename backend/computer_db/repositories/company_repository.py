"""Company Repository — SQLAlchemy store for company records.

Invariants:
    - fetch() orders by name, then id (total order)
    - delete() removes the company row only; dependents are the caller's job
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from computer_db.core.records import Company
from computer_db.models.company import Company as CompanyModel
from computer_db.repositories.rows import check_only_one


def _to_record(model: CompanyModel) -> Company:
    return Company(id=model.id, name=model.name)


class SqlCompanyRepository:
    """CompanyRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def count(self) -> int:
        result = await self._db.execute(select(func.count(CompanyModel.id)))
        return int(result.scalar_one())

    async def fetch(self, limit: int, offset: int) -> list[Company]:
        result = await self._db.execute(
            select(CompanyModel)
            .order_by(CompanyModel.name.asc(), CompanyModel.id.asc())
            .limit(limit)
            .offset(offset),
        )
        return [_to_record(m) for m in result.scalars().all()]

    async def get_by_id(self, company_id: int) -> Company | None:
        result = await self._db.execute(
            select(CompanyModel).where(CompanyModel.id == company_id),
        )
        model = check_only_one(result.scalars().all(), "get_company", company_id)
        return _to_record(model) if model is not None else None

    async def delete(self, company_id: int) -> bool:
        result = await self._db.execute(
            delete(CompanyModel)
            .where(CompanyModel.id == company_id)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1
