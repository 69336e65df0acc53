"""Request context management using contextvars.

Holds the current request ID so log records emitted anywhere during a
request can carry it (see RequestIdLogFilter).
"""

import logging
from contextvars import ContextVar

_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Set the request ID for the current async task."""
    _current_request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _current_request_id.get()


class RequestIdLogFilter(logging.Filter):
    """Attach request_id ("-" outside a request) to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True
