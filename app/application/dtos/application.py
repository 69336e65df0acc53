"""DTO for the parent application record (read-only here)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApplicationResult:
    """Application fields this service reads: id and owning tenant."""

    id: str
    tenant_id: str
