import logging
from datetime import datetime, timezone

import pytest

from pwconfig import constants

_CONSULTED_ENV = (
    constants.ENV_MODE,
    constants.ENV_CHANNEL,
    constants.ENV_VIDEO,
    constants.ENV_TRACE,
    constants.ENV_HEADED,
    constants.ENV_CI,
    constants.ENV_DEVTOOLS,
    constants.ENV_INSIDE_DOCKER,
    constants.ENV_WORKER_INDEX,
    constants.ENV_CHROMIUM_PATH,
    constants.ENV_FIREFOX_PATH,
    constants.ENV_WEBKIT_PATH,
    constants.ENV_SERVICE_URL,
    constants.ENV_SERVICE_ACCESS_KEY,
    constants.ENV_SERVICE_OS,
    constants.ENV_SERVICE_RUN_ID,
    constants.ENV_GRID_URL,
    constants.ENV_GRID_ACCESS_KEY,
    constants.ENV_VERSION_OVERRIDE,
    "LOG_LEVEL",
    "LOG_FORMAT",
)

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _CONSULTED_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger("pwconfig")
    saved = (root.handlers[:], root.level, package.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    package.setLevel(saved[2])
