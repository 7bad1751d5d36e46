"""Tests for logging configuration."""

import logging

from nutrifit.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("nutrifit")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_service_loggers_inherit_package_handler() -> None:
    configure_logging(logging.DEBUG)

    child = logging.getLogger("nutrifit.services.diary")

    assert child.getEffectiveLevel() == logging.DEBUG
    assert not logging.getLogger("nutrifit").propagate
