"""Logfire setup for the portal API.

Services open their own spans (``comment_service.create_comment`` and so on);
this module only configures the exporter and the framework integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from portal.config import Settings
from portal.util.error import ConfigurationError

SERVICE_NAME = "portal-api"

# Load balancer polls
UNTRACED_URLS = r"/health$"


def _should_send(settings: Settings) -> bool:
    forced = settings.observability.send_to_logfire
    token = settings.observability.logfire_token
    if forced is None:
        return bool(token)
    if forced and not token:
        raise ConfigurationError(
            "OBSERVABILITY__SEND_TO_LOGFIRE is set but no Logfire token is configured"
        )
    return forced


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Raises:
        ConfigurationError: If export is forced on without a token
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="indented",
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire ready",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks, tagging the reader's IP."""

    def _reader_attributes(request, attributes):
        client = getattr(request, "client", None)
        if client:
            return {**attributes, "reader_ip": client.host}
        return attributes

    logfire.instrument_fastapi(
        app,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_reader_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
