"""Platform-backed application repository (implements IApplicationRepository)."""

from __future__ import annotations

from app.application.dtos.application import ApplicationResult
from app.infrastructure.supabase._rest_client import SupabaseRESTClient
from app.infrastructure.supabase.tables import APPLICATION_COLUMNS, TABLE_APPLICATIONS


class SupabaseApplicationRepository:
    """Reads parent applications; only id and tenant_id are exposed."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        """Return application by ID (server-side eq filter, at most one row)."""
        rows = await (
            self._client.table(TABLE_APPLICATIONS)
            .select(APPLICATION_COLUMNS)
            .eq("id", application_id)
            .limit(1)
            .execute()
        )
        if not rows:
            return None
        row = rows[0]
        return ApplicationResult(id=str(row["id"]), tenant_id=str(row["tenant_id"]))
