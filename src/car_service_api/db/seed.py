"""
car_service_api.db.seed

Catalog seeding for the read-only `services` collection.

Usage: `python -m car_service_api.db.seed services.json`

The file holds a JSON array of service documents
(`service_id`, `title`, `price`, `description`, `img`, `facility`).
"""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Any

from car_service_api.db.init_db import init_db
from car_service_api.db.repositories.services import ServiceRepo
from car_service_api.db.session import create_engine, create_sessionmaker
from car_service_api.observability.logging import configure_logging, get_logger
from car_service_api.settings import Settings, get_settings

log = get_logger(__name__)


def load_documents(path: Path) -> list[dict[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise ValueError(f"{path} must contain a JSON array of objects")
    return data


async def seed_services(settings: Settings, documents: list[dict[str, Any]]) -> int:
    engine = create_engine(settings)
    try:
        if settings.env in ("dev", "test"):
            await init_db(engine)
        async with create_sessionmaker(engine)() as session:
            services = await ServiceRepo(session).insert_many(documents)
            await session.commit()
        return len(services)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Load service catalog documents.")
    parser.add_argument("path", type=Path, help="JSON array of service documents")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    count = asyncio.run(seed_services(settings, load_documents(args.path)))
    log.info("catalog_seeded", count=count, path=str(args.path))


if __name__ == "__main__":
    main()
