import logging

import pytest
from pydantic import ValidationError

from core.config import AppSettings
from core.logging_setup import LOGGER_NAME, configure_logging


def test_defaults(monkeypatch):
    for key in ("DICE_ROLL_WORKERS", "DICE_ROLL_PARALLEL_THRESHOLD", "DICE_ROLL_PARALLEL_VERBOSE", "DICE_ROLL_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    settings = AppSettings()
    assert settings.workers is None
    assert settings.parallel_verbose is False
    assert settings.log_level == "WARNING"
    assert settings.effective_workers() >= 1


def test_reads_prefixed_env_vars(monkeypatch):
    monkeypatch.setenv("DICE_ROLL_WORKERS", "3")
    monkeypatch.setenv("DICE_ROLL_PARALLEL_THRESHOLD", "10")
    monkeypatch.setenv("dice_roll_log_level", "debug")
    settings = AppSettings()
    assert settings.effective_workers() == 3
    assert settings.parallel_threshold == 10
    assert settings.log_level == "DEBUG"


def test_rejects_invalid_values():
    with pytest.raises(ValidationError):
        AppSettings(workers=0)
    with pytest.raises(ValidationError):
        AppSettings(log_level="loud")


def test_configure_logging_is_idempotent():
    logger = configure_logging(AppSettings(log_level="INFO"))
    configure_logging(AppSettings(log_level="INFO"))
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
