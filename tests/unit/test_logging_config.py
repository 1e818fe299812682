"""Tests for structlog-based logging setup."""

from __future__ import annotations

import logging

import pytest
import structlog

from mindflow.core.config import ObservabilityConfig
from mindflow.hooks import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    package_level = logging.getLogger("mindflow").level
    yield root
    logging.getLogger("mindflow").setLevel(package_level)
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestSetupLogging:
    def test_installs_structlog_formatter(self, restore_root_logger: logging.Logger) -> None:
        setup_logging(ObservabilityConfig(log_level="DEBUG"))
        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert logging.getLogger("mindflow").level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self, restore_root_logger: logging.Logger) -> None:
        setup_logging(ObservabilityConfig(log_level="chatty"))
        assert restore_root_logger.level == logging.INFO

    def test_binds_service_name(self, restore_root_logger: logging.Logger) -> None:
        setup_logging(ObservabilityConfig(service_name="notes-api"))
        assert structlog.contextvars.get_contextvars()["service"] == "notes-api"
