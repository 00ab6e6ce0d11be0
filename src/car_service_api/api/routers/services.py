"""
car_service_api.api.routers.services

Read-only service catalog endpoints.

Responsibilities:
- Search the catalog (`GET /services?search=`).
- Fetch one catalog entry with a title/price projection (`GET /services/{id}`).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from car_service_api.api.deps import db_session
from car_service_api.db.repositories.services import ServiceRepo
from car_service_api.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/services", tags=["services"])

_DETAIL_FIELDS = ("_id", "title", "price")


@router.get("")
async def list_services(
    search: str = Query(default=""),
    session: AsyncSession = Depends(db_session),
) -> list[dict[str, Any]]:
    try:
        services = await ServiceRepo(session).search(search)
    except SQLAlchemyError as e:
        log.error("store_error", error=str(e))
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch services"
        ) from e
    return [s.to_document() for s in services]


@router.get("/{service_id}")
async def get_service(
    service_id: str,
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any] | None:
    service = await ServiceRepo(session).get(service_id)
    if service is None:
        return None
    doc = service.to_document()
    return {k: doc[k] for k in _DETAIL_FIELDS}
