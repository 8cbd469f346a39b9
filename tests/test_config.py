import logging
import sys

import pytest

from cidrmanager.config import CIDRConfig, get_config, set_config
from cidrmanager.logging_config import get_logger, setup_logging


def test_config_defaults():
    config = CIDRConfig.from_env()

    assert config.standardize is False
    assert config.log_level == "INFO"
    assert config.log_file == ""


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("CIDRMANAGER_STANDARDIZE", "Yes")
    monkeypatch.setenv("CIDRMANAGER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CIDRMANAGER_LOG_FILE", "/tmp/cidrmanager.log")

    config = CIDRConfig.from_env()

    assert config.standardize is True
    assert config.log_level == "DEBUG"
    assert config.log_file == "/tmp/cidrmanager.log"


def test_get_config_is_cached(monkeypatch):
    first = get_config()
    monkeypatch.setenv("CIDRMANAGER_STANDARDIZE", "1")

    assert get_config() is first
    assert get_config().standardize is False

    set_config(None)
    assert get_config().standardize is True


def test_set_config():
    config = CIDRConfig(standardize=True)
    set_config(config)

    assert get_config() is config


def test_setup_logging_writes_file(tmp_path):
    log_path = tmp_path / "logs" / "cidrmanager.log"
    logger = setup_logging(
        level="DEBUG",
        log_file=str(log_path),
        enable_console=False,
        enable_file=True,
    )

    logging.getLogger("cidrmanager.tests").debug("parsed block")
    for handler in logger.handlers:
        handler.flush()

    contents = log_path.read_text(encoding="utf-8")
    assert "parsed block" in contents
    assert "DEBUG" in contents
    assert logger.propagate is False


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level: VERBOSE"):
        setup_logging(level="VERBOSE", enable_console=False)


def test_console_handler_writes_to_stderr():
    logger = setup_logging(level="DEBUG")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr


def test_get_logger_is_under_package_logger():
    logger = get_logger("cidrmanager.ipv4.cli")

    assert logger is logging.getLogger("cidrmanager.ipv4.cli")
    assert logger.parent is logging.getLogger("cidrmanager")
