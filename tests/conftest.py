import logging

import pytest

from cidrmanager.config import set_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("CIDRMANAGER_STANDARDIZE", "CIDRMANAGER_LOG_LEVEL", "CIDRMANAGER_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)
    logger = logging.getLogger("cidrmanager")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
