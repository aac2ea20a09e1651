import logging

import pytest

from snet.config import set_config
from snet.ip.core import Network, parse_cidr

CONFIG_VARIABLES = ("SNET4_FORMAT", "SNET4_LIMIT", "SNET4_LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """No .env files, no SNET4_* variables and a fresh config per test."""
    for name in CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("snet.config.env_locations", lambda: [])
    set_config(None)
    yield
    set_config(None)
    logger = logging.getLogger("snet")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def class_c_28() -> Network:
    return parse_cidr("192.168.147.0/28")
