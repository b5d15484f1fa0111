#!/usr/bin/env python3
"""Run the portal API under uvicorn."""

import sys

import logfire
import uvicorn

from portal.config import Settings
from portal.util.logging import setup_logging
from portal.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    # Before the app module is imported, so import-time failures are traced
    configure_logfire(settings)

    logfire.info("Starting portal API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "portal.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Portal API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
