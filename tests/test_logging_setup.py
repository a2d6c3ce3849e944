from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from bundle_stats_metrics.config.logging_setup import LOGGER_NAME, configure_logging


@pytest.fixture()
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_configure_logging_given_error_log_path_then_adds_rotating_warning_handler(
    tmp_path: Path, package_logger: logging.Logger
):
    error_log = tmp_path / "logs" / "bundle_stats_errors.log"

    logger = configure_logging("debug", error_log)

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.WARNING

    logging.getLogger(f"{LOGGER_NAME}.plugin").warning("Bundle size too big")
    logging.getLogger(f"{LOGGER_NAME}.plugin").info("Bundle written")
    file_handlers[0].flush()

    content = error_log.read_text("utf-8")
    assert "WARNING [bundle_stats_metrics.plugin] Bundle size too big" in content
    assert "Bundle written" not in content


def test_configure_logging_given_no_path_then_console_only(package_logger: logging.Logger):
    logger = configure_logging("warning")

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], RotatingFileHandler)
