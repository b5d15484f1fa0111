"""Unit tests for Logfire export selection."""

import pytest

from portal.config import ObservabilitySettings, Settings
from portal.util.error import ConfigurationError
from portal.util.observability import _should_send


def _settings(**observability) -> Settings:
    return Settings(observability=ObservabilitySettings(**observability))


@pytest.mark.parametrize(
    ("observability", "expected"),
    [
        ({}, False),
        ({"logfire_token": "tok"}, True),
        ({"logfire_token": "tok", "send_to_logfire": False}, False),
    ],
)
def test_export_follows_token(observability, expected):
    assert _should_send(_settings(**observability)) is expected


def test_forced_export_needs_token():
    with pytest.raises(ConfigurationError):
        _should_send(_settings(send_to_logfire=True))
