"""Managed platform (Supabase) REST client and repositories."""

from app.infrastructure.supabase._rest_client import (
    PlatformRequestError,
    SupabaseRESTClient,
)
from app.infrastructure.supabase.client import (
    close_supabase,
    get_anon_client,
    get_service_client,
)

__all__ = [
    "PlatformRequestError",
    "SupabaseRESTClient",
    "close_supabase",
    "get_anon_client",
    "get_service_client",
]
