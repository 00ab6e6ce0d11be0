"""
car_service_api.api.routers.orders

Order endpoints.

Responsibilities:
- Create orders from client-supplied documents.
- List the caller's own orders (guarded, identity-isolated).
- Update an order's status; delete an order.

Write results mirror document-store acknowledgements so existing clients can
keep reading `insertedId`, `modifiedCount` and `deletedCount`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from car_service_api.api.deps import db_session
from car_service_api.auth.deps import require_email_match
from car_service_api.auth.models import Principal
from car_service_api.db.repositories.orders import OrderRepo
from car_service_api.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


class OrderStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: Any = None


class InsertOneResult(BaseModel):
    acknowledged: bool = True
    insertedId: str


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int
    upsertedId: str | None = None
    upsertedCount: int = 0


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int


@router.post("", response_model=InsertOneResult)
async def create_order(
    order: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(db_session),
) -> InsertOneResult:
    # Known gap: the order's email is not checked against any credential.
    try:
        created = await OrderRepo(session).create(order)
        await session.commit()
    except SQLAlchemyError as e:
        log.error("store_error", error=str(e))
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create order"
        ) from e
    log.info("order_created", order_id=created.id, email=created.email)
    return InsertOneResult(insertedId=created.id)


@router.get("")
async def list_orders(
    principal: Principal = Depends(require_email_match),
    session: AsyncSession = Depends(db_session),
) -> list[dict[str, Any]]:
    orders = await OrderRepo(session).list_for_email(principal.email)
    return [o.to_document() for o in orders]


@router.patch("/{order_id}", response_model=UpdateResult)
async def update_order_status(
    order_id: str,
    body: OrderStatusUpdate,
    session: AsyncSession = Depends(db_session),
) -> UpdateResult:
    matched, modified = await OrderRepo(session).set_status(order_id, body.status)
    await session.commit()
    log.info("order_updated", order_id=order_id, matched=matched, modified=modified)
    return UpdateResult(matchedCount=matched, modifiedCount=modified)


@router.delete("/{order_id}", response_model=DeleteResult)
async def delete_order(
    order_id: str,
    session: AsyncSession = Depends(db_session),
) -> DeleteResult:
    deleted = await OrderRepo(session).delete(order_id)
    await session.commit()
    log.info("order_deleted", order_id=order_id, deleted=deleted)
    return DeleteResult(deletedCount=deleted)
