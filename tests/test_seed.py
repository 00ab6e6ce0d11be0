"""
tests.test_seed

Catalog seeding from a JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from car_service_api.db.repositories.services import ServiceRepo
from car_service_api.db.seed import load_documents, seed_services
from car_service_api.db.session import create_engine, create_sessionmaker
from car_service_api.settings import Settings

DOCS = [
    {"service_id": "01", "title": "Full Car Repair", "price": "200.00", "facility": [{"name": "Wash"}]},
    {"service_id": "02", "title": "Engine Repair", "price": "150.00"},
]


def test_load_documents_requires_array_of_objects(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"title": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_documents(path)


@pytest.mark.asyncio
async def test_seed_services_loads_catalog(tmp_path: Path, settings: Settings) -> None:
    path = tmp_path / "services.json"
    path.write_text(json.dumps(DOCS), encoding="utf-8")

    count = await seed_services(settings, load_documents(path))
    assert count == len(DOCS)

    engine = create_engine(settings)
    try:
        async with create_sessionmaker(engine)() as session:
            services = await ServiceRepo(session).search()
    finally:
        await engine.dispose()
    assert {s.title for s in services} == {d["title"] for d in DOCS}
    full = next(s for s in services if s.service_id == "01")
    assert full.facility == DOCS[0]["facility"]
