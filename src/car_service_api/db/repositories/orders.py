"""
car_service_api.db.repositories.orders

Repository for `Order` documents.

Responsibilities:
- Insert client-supplied order documents.
- List orders by email.
- Set an order's status; delete an order.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from car_service_api.db.ids import parse_document_id
from car_service_api.db.models import Order

_MISSING = object()


class OrderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, document: dict[str, Any]) -> Order:
        # Ids are always generated server-side.
        body = {k: v for k, v in document.items() if k != "_id"}
        email = body.get("email")
        order = Order(email=email if isinstance(email, str) else None, document=body)
        self._session.add(order)
        await self._session.flush()
        return order

    async def list_for_email(self, email: str) -> list[Order]:
        stmt = select(Order).where(Order.email == email).order_by(Order.created_at, Order.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def set_status(self, order_id: str, status: Any) -> tuple[int, int]:
        """
        Returns `(matched, modified)`; an unchanged status counts as matched only.
        """

        order = await self._session.get(Order, parse_document_id(order_id), with_for_update=True)
        if order is None:
            return 0, 0
        current = (order.document or {}).get("status", _MISSING)
        if current is not _MISSING and current == status:
            return 1, 0
        order.document = {**(order.document or {}), "status": status}
        await self._session.flush()
        return 1, 1

    async def delete(self, order_id: str) -> int:
        stmt = delete(Order).where(Order.id == parse_document_id(order_id))
        result = await self._session.execute(stmt)
        return result.rowcount or 0
