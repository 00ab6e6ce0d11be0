"""
car_service_api.db.models

Persistence schema for the two document collections.

Responsibilities:
- Service: read-only catalog entry.
- Order: client-supplied document, stored verbatim with the email extracted
  into an indexed column for per-user listing.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from car_service_api.db.base import Base
from car_service_api.db.ids import new_document_id


def _utcnow() -> datetime:
    return datetime.utcnow()


class Service(Base):
    __tablename__ = "services"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_document_id)
    service_id: Mapped[str] = mapped_column(String(64), nullable=False, default="", index=True)
    title: Mapped[str] = mapped_column(String(256), nullable=False)
    # Prices are kept as entered in the catalog and searched as text.
    price: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    img: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    facility: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)

    def to_document(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "service_id": self.service_id,
            "title": self.title,
            "img": self.img,
            "price": self.price,
            "description": self.description,
            "facility": self.facility or [],
        }


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_document_id)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    document: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    __table_args__ = (Index("ix_orders_email_created", "email", "created_at"),)

    def to_document(self) -> dict[str, Any]:
        return {"_id": self.id, **(self.document or {})}


# --- Module Notes -----------------------------------------------------------
# `Order.document` is reassigned (never mutated in place) so the JSON column is
# flagged dirty without MutableDict tracking.
