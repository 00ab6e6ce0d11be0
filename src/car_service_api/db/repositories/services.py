"""
car_service_api.db.repositories.services

Repository for the read-only `Service` catalog.

Responsibilities:
- Search the catalog by a free-text term.
- Fetch one entry by id.
- Bulk insert entries (seeding only; the HTTP API never writes the catalog).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from car_service_api.db.ids import parse_document_id
from car_service_api.db.models import Service

_SEARCH_COLUMNS = (Service.title, Service.service_id, Service.price, Service.description, Service.id)


class ServiceRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def search(self, term: str = "") -> list[Service]:
        stmt = select(Service)
        if term:
            # Literal, case-insensitive substring match; LIKE wildcards are escaped.
            stmt = stmt.where(or_(*(col.icontains(term, autoescape=True) for col in _SEARCH_COLUMNS)))
        return list((await self._session.execute(stmt)).scalars().all())

    async def get(self, service_id: str) -> Service | None:
        return await self._session.get(Service, parse_document_id(service_id))

    async def insert_many(self, documents: Iterable[dict[str, Any]]) -> list[Service]:
        services = [
            Service(
                service_id=str(doc.get("service_id", "")),
                title=str(doc["title"]),
                price=str(doc.get("price", "")),
                description=str(doc.get("description", "")),
                img=doc.get("img"),
                facility=list(doc.get("facility") or []),
            )
            for doc in documents
        ]
        self._session.add_all(services)
        await self._session.flush()
        return services
