"""
Logging configuration for applications embedding PaymentHub.

The library itself only creates module loggers under the "paymenthub"
namespace; calling configure_logging is left to the host application.
"""

import logging

from paymenthub.config import get_settings

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Install the standard log format and set the paymenthub level.

    Args:
        level: Overrides PAYMENTHUB_LOG_LEVEL when given

    Returns:
        The "paymenthub" package logger
    """
    log_level = getattr(logging, (level or get_settings().log_level).upper(), logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    package_logger = logging.getLogger("paymenthub")
    package_logger.setLevel(log_level)
    return package_logger
