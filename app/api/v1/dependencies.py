"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the task use cases. Use cases are built from
infrastructure implementations here; routes depend only on these
dependencies, not on infra directly. Tests replace them through
app.dependency_overrides.

The task endpoint acts with the service-role client, the dashboard with the
anon client. A client is None when its credential is missing; the use case
reports that as a configuration error.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.services import ITaskEventPublisher
from app.application.use_cases.tasks import TaskCreationService, TodayDashboardService
from app.core.config import get_settings
from app.infrastructure.messaging import (
    NullTaskEventPublisher,
    RealtimeTaskEventPublisher,
    RedisTaskEventPublisher,
    get_redis_publisher,
    set_redis_publisher,
)
from app.infrastructure.supabase import (
    SupabaseRESTClient,
    get_anon_client,
    get_service_client,
)
from app.infrastructure.supabase.repositories import (
    SupabaseApplicationRepository,
    SupabaseTaskRepository,
)
from app.shared.utils.datetime import resolve_timezone


def get_service_platform_client() -> SupabaseRESTClient | None:
    """Service-role platform client, or None when not configured."""
    return get_service_client()


def get_anon_platform_client() -> SupabaseRESTClient | None:
    """Anon-key platform client, or None when not configured."""
    return get_anon_client()


def get_task_event_publisher(
    client: Annotated[SupabaseRESTClient | None, Depends(get_service_platform_client)],
) -> ITaskEventPublisher | None:
    """Publisher for the configured notification backend.

    Returns None for the realtime backend when the platform is not configured
    (the request fails before publishing anyway).
    """
    settings = get_settings()
    if settings.notification_backend == "none":
        return NullTaskEventPublisher()
    if settings.notification_backend == "redis":
        publisher = get_redis_publisher()
        if publisher is None:
            publisher = RedisTaskEventPublisher()
            set_redis_publisher(publisher)
        return publisher
    if client is None:
        return None
    return RealtimeTaskEventPublisher(client, topic=settings.notification_topic)


def get_task_creation_service(
    client: Annotated[SupabaseRESTClient | None, Depends(get_service_platform_client)],
    publisher: Annotated[ITaskEventPublisher | None, Depends(get_task_event_publisher)],
) -> TaskCreationService:
    """Task creation use case wired to the service-role client."""
    if client is None:
        return TaskCreationService(None, None, publisher)
    return TaskCreationService(
        SupabaseApplicationRepository(client),
        SupabaseTaskRepository(client),
        publisher,
    )


def get_today_dashboard_service(
    client: Annotated[SupabaseRESTClient | None, Depends(get_anon_platform_client)],
) -> TodayDashboardService:
    """Dashboard use case wired to the anon client and the dashboard time zone."""
    tz = resolve_timezone(get_settings().dashboard_timezone)
    repo = SupabaseTaskRepository(client) if client is not None else None
    return TodayDashboardService(repo, tz)
