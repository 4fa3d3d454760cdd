"""Unit tests for configure_logging."""

import io
import logging

import pytest

from miraveja_registrar.infrastructure.logging_config import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_writes_formatted_records(self):
        """Test that package records reach the configured stream."""
        stream = io.StringIO()

        configure_logging("debug", stream=stream)
        logging.getLogger("miraveja_registrar.application.generator").debug("planning %s", "Cart")

        output = stream.getvalue()
        assert "DEBUG" in output
        assert "miraveja_registrar.application.generator: planning Cart" in output

    def test_level_filters_records(self):
        """Test that records below the level are dropped."""
        stream = io.StringIO()

        logger = configure_logging("WARNING", stream=stream)
        logger.info("hidden")

        assert logger.level == logging.WARNING
        assert stream.getvalue() == ""

    def test_reconfiguring_replaces_the_handler(self):
        """Test that repeated calls keep a single handler."""
        configure_logging(stream=io.StringIO())
        logger = configure_logging(stream=io.StringIO())

        assert len(logger.handlers) == 1
