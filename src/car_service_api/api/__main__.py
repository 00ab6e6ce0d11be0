"""
car_service_api.api.__main__

Entrypoint for running the API via `python -m car_service_api.api`.

Responsibilities:
- Load settings, exiting non-zero when required secrets are missing.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import sys

import uvicorn
from pydantic import ValidationError

from car_service_api.api.app import create_app
from car_service_api.observability.logging import configure_logging, get_logger
from car_service_api.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging(service_name="car-service-api", level="INFO")
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        log.error("invalid_settings", fields=missing)
        sys.exit(1)

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
