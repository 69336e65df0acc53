"""Redis Pub/Sub publisher for task notifications.

Alternative to the platform broadcast for deployments that fan task events
out through their own Redis. Messages are JSON {"event", "payload"} on the
configured topic channel.
"""

from __future__ import annotations

import json
import logging

import redis.asyncio as redis

from app.application.dtos.task import TaskCreatedEvent
from app.core.config import get_settings
from app.infrastructure.messaging.realtime import TASK_CREATED_EVENT

logger = logging.getLogger(__name__)


class RedisTaskEventPublisher:
    """Publishes task events to a Redis channel named after the topic."""

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize. Pass redis_client for DI/testing."""
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup; failures are logged only."""
        if self._connected:
            return
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=5,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis pub/sub connection failed: %s", e)
            await client.aclose()
            self._connected = False
            self.redis = None
            return
        self.redis = client
        self._connected = True
        logger.info("Redis pub/sub connected")

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self._connected = False
            logger.info("Redis pub/sub disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected."""
        return self._connected and self.redis is not None

    async def publish_task_created(self, event: TaskCreatedEvent) -> None:
        """Publish task.created on the topic channel.

        Connects first when startup did not (or could not) connect.

        Raises:
            ConnectionError: If Redis is not reachable.
            redis.RedisError: If the publish command fails.
        """
        if not self.is_available():
            await self.connect()
        if not self.is_available() or self.redis is None:
            raise ConnectionError("Redis not available")
        channel = self.settings.notification_topic
        message = json.dumps({"event": TASK_CREATED_EVENT, "payload": event.to_dict()})
        await self.redis.publish(channel, message)
        logger.debug("Published %s to %s: %s", TASK_CREATED_EVENT, channel, event.task_id)


_publisher: RedisTaskEventPublisher | None = None


def get_redis_publisher() -> RedisTaskEventPublisher | None:
    """Return the global Redis publisher (set at startup)."""
    return _publisher


def set_redis_publisher(publisher: RedisTaskEventPublisher | None) -> None:
    """Set the global Redis publisher."""
    global _publisher
    _publisher = publisher
