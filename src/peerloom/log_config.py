# peerloom/log_config.py
"""Logging configuration for the peerloom library using Loguru.

The library never installs handlers on import. Its messages are disabled
until an application calls :func:`configure_logging` (or runs
``logger.enable("peerloom")`` itself), so importing peerloom stays silent.
"""

import sys

from loguru import logger

__all__ = ["LOG_FORMAT", "configure_logging", "logger"]

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

logger.disable("peerloom")


def configure_logging(level: str = "INFO", sink=sys.stderr) -> int:
    """Route peerloom log records to ``sink``.

    Removes existing handlers, adds one with the standard format and enables
    the ``peerloom`` namespace.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "peerloom.log").

    Returns:
        int: The loguru handler id, usable with ``logger.remove``.
    """
    logger.remove()
    handler_id = logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,  # keep API keys out of rendered tracebacks
    )
    logger.enable("peerloom")
    logger.info(f"peerloom logging configured with level={level.upper()}")
    return handler_id
