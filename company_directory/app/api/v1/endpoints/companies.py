"""
Company endpoints for API v1.

These routes provide CRUD operations for company records.  The list
endpoint always returns the full collection: clients filter, sort and
paginate locally.  Request bodies are validated by the pydantic
schemas, so missing required fields or negative employee counts are
answered with 422 before reaching the service.
"""

import asyncio
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from company_directory.app.core.config import settings
from company_directory.app.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from company_directory.app.services.company_service import CompanyService


async def artificial_delay() -> None:
    """Sleep for ``settings.artificial_delay_ms`` before handling a request."""
    if settings.artificial_delay_ms > 0:
        await asyncio.sleep(settings.artificial_delay_ms / 1000)


router = APIRouter(dependencies=[Depends(artificial_delay)])


@router.get("", response_model=List[CompanyRead])
async def list_companies() -> List[CompanyRead]:
    """Return every company record, newest first.

    No filtering or pagination parameters are accepted.
    """
    return await CompanyService.list_companies()


@router.get("/{company_id}", response_model=CompanyRead)
async def get_company(company_id: str) -> CompanyRead:
    """Retrieve a single company by its ID.  Raises 404 if not found."""
    try:
        return await CompanyService.get_company(company_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
async def create_company(company: CompanyCreate) -> CompanyRead:
    """Create a new company.

    The store assigns the ``id`` and timestamps; ``employees``,
    ``founded`` and ``logoIcon`` fall back to their defaults when
    omitted.
    """
    return await CompanyService.create_company(company)


@router.put("/{company_id}", response_model=CompanyRead)
async def update_company(company_id: str, updates: CompanyUpdate) -> CompanyRead:
    """Update an existing company.

    Partial updates are supported; fields that are omitted or ``null``
    remain unchanged.
    """
    update_dict = {k: v for k, v in updates.model_dump().items() if v is not None}
    try:
        return await CompanyService.update_company(company_id, update_dict)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(company_id: str) -> None:
    """Delete a company.  Raises 404 if it does not exist."""
    try:
        await CompanyService.delete_company(company_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
