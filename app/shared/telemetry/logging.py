"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings
from app.shared.context import RequestIdLogFilter

# Third-party loggers that log every outbound request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout; each line carries the request ID. Outbound HTTP
    client chatter is kept at WARNING unless debugging.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdLogFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(log_level if settings.debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
