"""Dependency Factories — per-request service construction for FastAPI routes.

Invariants:
    - One AsyncSession per request, shared by every repository of that request
    - Services are built per request with explicit repositories (no singletons)
    - Tests override get_db only; everything else follows
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from computer_db.infrastructure.database import get_db
from computer_db.repositories.company_repository import SqlCompanyRepository
from computer_db.repositories.computer_repository import SqlComputerRepository
from computer_db.services.company_service import CompanyService
from computer_db.services.computer_service import ComputerService


def get_computer_service(db: AsyncSession = Depends(get_db)) -> ComputerService:
    return ComputerService(
        db, SqlComputerRepository(db), SqlCompanyRepository(db),
    )


def get_company_service(db: AsyncSession = Depends(get_db)) -> CompanyService:
    return CompanyService(
        db, SqlCompanyRepository(db), SqlComputerRepository(db),
    )
