"""
car_service_api.db.ids

Document identifiers.

Identifiers are uuid4 values stored and exposed as 32-char hex strings.
"""

from __future__ import annotations

import uuid


class InvalidDocumentId(ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid document id: {raw!r}")
        self.raw = raw


def new_document_id() -> str:
    return uuid.uuid4().hex


def parse_document_id(raw: str) -> str:
    # Accepts any UUID spelling (hex, dashed, braced); anything else is a caller error.
    try:
        return uuid.UUID(raw).hex
    except (TypeError, ValueError) as e:
        raise InvalidDocumentId(raw) from e
