"""Platform clients, one per credential.

The service client uses the privileged service-role key (task endpoint,
bypasses row-level security). The anon client uses the restricted key the
dashboard acts with. Both are created lazily on first use so a missing
credential surfaces per request instead of at startup.
"""

import logging

from app.core.config import get_settings
from app.infrastructure.supabase._rest_client import SupabaseRESTClient

logger = logging.getLogger(__name__)

_service_client: SupabaseRESTClient | None = None
_anon_client: SupabaseRESTClient | None = None


def get_service_client() -> SupabaseRESTClient | None:
    """Return the service-role client, or None if URL or key is not configured."""
    global _service_client
    if _service_client is None:
        settings = get_settings()
        if not settings.is_service_configured:
            return None
        _service_client = SupabaseRESTClient(
            settings.supabase_url,
            settings.supabase_service_role_key.get_secret_value(),
            timeout=settings.platform_timeout_seconds,
        )
    return _service_client


def get_anon_client() -> SupabaseRESTClient | None:
    """Return the anon-key client, or None if URL or key is not configured."""
    global _anon_client
    if _anon_client is None:
        settings = get_settings()
        if not settings.is_dashboard_configured:
            return None
        _anon_client = SupabaseRESTClient(
            settings.supabase_url,
            settings.supabase_anon_key.get_secret_value(),
            timeout=settings.platform_timeout_seconds,
        )
    return _anon_client


async def close_supabase() -> None:
    """Close both clients' HTTP connection pools. Call from app shutdown."""
    global _service_client, _anon_client
    for client in (_service_client, _anon_client):
        if client is not None:
            await client.aclose()
    if _service_client is not None or _anon_client is not None:
        logger.info("Platform HTTP clients closed")
    _service_client = None
    _anon_client = None
