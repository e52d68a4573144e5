"""Root conftest: shared test configuration."""

import os

import pytest

from ticketcore.config import get_settings

# Ensure a developer's shell or .env does not flip strictness under the tests
os.environ.setdefault("TICKET_STRICT_STATUS", "false")
os.environ.setdefault("TICKET_ALLOW_EMPTY_FIELDS", "true")
os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
