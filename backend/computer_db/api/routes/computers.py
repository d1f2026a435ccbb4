"""Computer Routes — dashboard listing and CRUD for computers.

Invariants:
    - Routes parse and default input, then delegate to ComputerService
    - Defaults applied here (page 0, settings page size, sort "name", order
      "asc") before the core sees the request
    - Unknown sort/order values are rejected by the registry, not replaced
    - A missing computer is 404 on GET; on PUT/DELETE the service rejects it
      with 400 (id must exist)
    - Ids above MAX_ID are 404 on GET and 400 everywhere else
"""

from fastapi import APIRouter, Depends, Path, Query, Response, status

from computer_db.api.dependencies import get_computer_service
from computer_db.config import get_settings
from computer_db.core.enforce_requests import MAX_ID
from computer_db.core.errors import ResourceNotFoundError
from computer_db.core.paging import QueryRequest
from computer_db.core.records import Computer
from computer_db.core.sort_columns import parse_sort_column, parse_sort_direction
from computer_db.schemas.computer import (
    ComputerResponse, ComputerSelection, ComputerWrite,
)
from computer_db.schemas.page import PageResponse
from computer_db.services.computer_service import ComputerService

router = APIRouter(prefix="/api/v1/computers", tags=["computers"])


@router.get("", response_model=PageResponse[ComputerResponse])
async def list_computers(
    search: str | None = Query(None, max_length=255),
    page: int = Query(0),
    page_size: int | None = Query(None),
    sort: str = Query("name"),
    order: str = Query("asc"),
    company_id: int | None = Query(None, le=MAX_ID),
    service: ComputerService = Depends(get_computer_service),
):
    """Dashboard listing: filtered, sorted, paginated."""
    settings = get_settings()
    request = QueryRequest(
        page=page,
        page_size=(
            settings.default_page_size if page_size is None
            else min(page_size, settings.max_page_size)
        ),
        filter_text=search,
        sort_column=parse_sort_column(sort),
        sort_direction=parse_sort_direction(order),
        company_id=company_id,
    )
    result = await service.list(request)
    return PageResponse[ComputerResponse].from_page(
        result, ComputerResponse.from_record,
    )


@router.get("/{computer_id}", response_model=ComputerResponse)
async def get_computer(
    computer_id: int, service: ComputerService = Depends(get_computer_service),
):
    computer = await service.get(computer_id)
    if computer is None:
        raise ResourceNotFoundError("Computer", computer_id)
    return ComputerResponse.from_record(computer)


@router.post(
    "", response_model=ComputerResponse, status_code=status.HTTP_201_CREATED,
)
async def create_computer(
    body: ComputerWrite, service: ComputerService = Depends(get_computer_service),
):
    created = await service.insert(body.to_record())
    return ComputerResponse.from_record(created)


@router.put("/{computer_id}", response_model=ComputerResponse)
async def update_computer(
    body: ComputerWrite,
    computer_id: int = Path(le=MAX_ID),
    service: ComputerService = Depends(get_computer_service),
):
    await service.update(body.to_record(computer_id))
    # Re-read so company_name reflects the new company_id
    return ComputerResponse.from_record(await service.get(computer_id))


@router.delete("/{computer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_computer(
    computer_id: int = Path(le=MAX_ID),
    service: ComputerService = Depends(get_computer_service),
):
    await service.delete(Computer(id=computer_id, name=""))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_computers(
    body: ComputerSelection,
    service: ComputerService = Depends(get_computer_service),
):
    """Delete the computers selected on the dashboard."""
    await service.delete_many(body.ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
