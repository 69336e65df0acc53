"""Platform broadcast publisher for task notifications."""

from __future__ import annotations

import logging

from app.application.dtos.task import TaskCreatedEvent
from app.infrastructure.supabase._rest_client import SupabaseRESTClient

logger = logging.getLogger(__name__)

TASK_CREATED_EVENT = "task.created"


class RealtimeTaskEventPublisher:
    """Broadcasts task events on a platform Realtime topic."""

    def __init__(self, client: SupabaseRESTClient, topic: str = "tasks") -> None:
        self._client = client
        self._topic = topic

    async def publish_task_created(self, event: TaskCreatedEvent) -> None:
        """Broadcast task.created; raises PlatformRequestError or httpx errors on failure."""
        await self._client.channel(self._topic).send(TASK_CREATED_EVENT, event.to_dict())
        logger.debug("Broadcast %s on %s: %s", TASK_CREATED_EVENT, self._topic, event.task_id)


class NullTaskEventPublisher:
    """Publisher used when notifications are disabled."""

    async def publish_task_created(self, event: TaskCreatedEvent) -> None:
        logger.debug("Notifications disabled, skipping %s for %s", TASK_CREATED_EVENT, event.task_id)
