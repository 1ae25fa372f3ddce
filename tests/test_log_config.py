from io import StringIO

import pytest
from loguru import logger

from peerloom.auth import ApiKeyAuth
from peerloom.log_config import configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the silent library default after each test."""
    yield
    logger.remove()
    logger.disable("peerloom")


def test_configure_logging_default_level():
    """Test configure_logging with default INFO level."""
    logger.remove()
    configure_logging()

    handler_id = list(logger._core.handlers.keys())[-1]
    handler = logger._core.handlers[handler_id]
    assert len(logger._core.handlers) == 1
    assert handler._levelno == logger.level("INFO").no


def test_configure_logging_custom_level_is_case_insensitive():
    handler_id = configure_logging(level="debug")
    handler = logger._core.handlers[handler_id]
    assert handler._levelno == logger.level("DEBUG").no


def test_configure_logging_enables_library_messages():
    sink = StringIO()
    configure_logging(level="DEBUG", sink=sink)

    ApiKeyAuth(api_key="k")

    assert "ApiKeyAuth initialized." in sink.getvalue()


def test_configure_logging_filters_below_level():
    sink = StringIO()
    configure_logging(level="WARNING", sink=sink)

    logger.info("Should not appear")
    logger.warning("Should appear")

    output = sink.getvalue()
    assert "Should not appear" not in output
    assert "Should appear" in output


def test_library_is_silent_until_configured():
    sink = StringIO()
    logger.add(sink, level="TRACE")

    ApiKeyAuth(api_key="k")

    assert sink.getvalue() == ""
