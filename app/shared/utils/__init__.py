"""Shared utilities: datetime helpers."""

from app.shared.utils.datetime import (
    ensure_utc,
    parse_iso_datetime,
    resolve_timezone,
    to_iso_utc,
    utc_now,
)

__all__ = [
    "utc_now",
    "ensure_utc",
    "parse_iso_datetime",
    "to_iso_utc",
    "resolve_timezone",
]
