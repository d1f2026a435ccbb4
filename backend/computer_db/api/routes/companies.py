"""Company Routes — company listing, lookup, and cascading delete.

Invariants:
    - DELETE removes the company and all of its computers, or nothing
    - Listing is by name only; the dashboard's search/sort do not apply
"""

from fastapi import APIRouter, Depends, Path, Query, Response, status

from computer_db.api.dependencies import get_company_service
from computer_db.config import get_settings
from computer_db.core.enforce_requests import MAX_ID
from computer_db.core.errors import ResourceNotFoundError
from computer_db.core.paging import QueryRequest
from computer_db.core.records import Company
from computer_db.schemas.company import CompanyResponse
from computer_db.schemas.page import PageResponse
from computer_db.services.company_service import CompanyService

router = APIRouter(prefix="/api/v1/companies", tags=["companies"])


@router.get("", response_model=PageResponse[CompanyResponse])
async def list_companies(
    page: int = Query(0),
    page_size: int | None = Query(None),
    service: CompanyService = Depends(get_company_service),
):
    settings = get_settings()
    request = QueryRequest(
        page=page,
        page_size=(
            settings.default_page_size if page_size is None
            else min(page_size, settings.max_page_size)
        ),
    )
    result = await service.list(request)
    return PageResponse[CompanyResponse].from_page(
        result, CompanyResponse.from_record,
    )


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: int, service: CompanyService = Depends(get_company_service),
):
    company = await service.get(company_id)
    if company is None:
        raise ResourceNotFoundError("Company", company_id)
    return CompanyResponse.from_record(company)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: int = Path(le=MAX_ID),
    service: CompanyService = Depends(get_company_service),
):
    """Delete a company and every computer it owns."""
    await service.delete(Company(id=company_id, name=""))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
