"""
Root Pytest Fixtures.

Shared fixtures available to all test types. Every test starts with fresh
configuration caches and no API client singleton.
"""

import logging
from collections.abc import Generator

import pytest

import queue_cli.cli.client as client_module
from queue_cli.core import logging as logging_module
from queue_cli.core.config import CONFIG_DIR_ENV, get_app_config, get_settings


@pytest.fixture(autouse=True)
def _isolate_cli_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset cached configuration and the client singleton around each test."""
    for var in (CONFIG_DIR_ENV, "RUN_NAME", "QUEUE_CLI_CLUSTER_URL", "QUEUE_CLI_SERVICE_NAME", "QUEUE_CLI_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)

    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None
    client_module._client = None
    client_module._service_name = None
    yield
    # Commands attach handlers to the CliRunner's streams; drop them once those are closed.
    for handler in logging.getLogger().handlers[:]:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            logging.getLogger().removeHandler(handler)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None
    client_module._client = None
    client_module._service_name = None
