"""Messaging: task event publishers (platform broadcast, Redis pub/sub)."""

from app.infrastructure.messaging.realtime import (
    TASK_CREATED_EVENT,
    NullTaskEventPublisher,
    RealtimeTaskEventPublisher,
)
from app.infrastructure.messaging.redis_pubsub import (
    RedisTaskEventPublisher,
    get_redis_publisher,
    set_redis_publisher,
)

__all__ = [
    "TASK_CREATED_EVENT",
    "NullTaskEventPublisher",
    "RealtimeTaskEventPublisher",
    "RedisTaskEventPublisher",
    "get_redis_publisher",
    "set_redis_publisher",
]
