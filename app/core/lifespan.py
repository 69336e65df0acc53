"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (notification
publisher, telemetry, platform HTTP clients).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: configuration report, then the Redis publisher (redis
    notification backend only). Telemetry is installed earlier, by
    create_app. Shutdown order: Redis disconnect, platform clients close,
    telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    if not settings.is_service_configured:
        logger.error(
            "SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is missing; "
            "task creation will answer 500 until configured"
        )
    if not settings.is_dashboard_configured:
        logger.warning("SUPABASE_URL or SUPABASE_ANON_KEY is missing; dashboard disabled")

    if settings.notification_backend == "redis":
        from app.infrastructure.messaging.redis_pubsub import (
            RedisTaskEventPublisher,
            set_redis_publisher,
        )

        publisher = RedisTaskEventPublisher()
        await publisher.connect()
        set_redis_publisher(publisher)

    logger.info(
        "%s %s started (notification backend: %s)",
        settings.app_name,
        settings.app_version,
        settings.notification_backend,
    )

    yield

    # ---- Shutdown ----
    from app.infrastructure.messaging.redis_pubsub import (
        get_redis_publisher,
        set_redis_publisher,
    )

    redis_publisher = get_redis_publisher()
    if redis_publisher is not None:
        await redis_publisher.disconnect()
        set_redis_publisher(None)

    from app.infrastructure.supabase.client import close_supabase

    await close_supabase()

    from app.shared.telemetry.telemetry import get_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
