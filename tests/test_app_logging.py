"""Tests for logging configuration."""

import logging

from meal_scorer.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("meal_scorer")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_sets_level() -> None:
    configure_logging(logging.DEBUG)

    assert logging.getLogger("meal_scorer").level == logging.DEBUG
    configure_logging()
