"""Platform REST client, repositories and publishers against an httpx MockTransport."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import httpx
import pytest

from app.application.dtos.task import TaskCreatedEvent
from app.infrastructure.messaging import (
    RealtimeTaskEventPublisher,
    RedisTaskEventPublisher,
)
from app.infrastructure.messaging import redis_pubsub
from app.infrastructure.supabase import SupabaseRESTClient
from app.infrastructure.supabase._rest_client import PlatformRequestError
from app.infrastructure.supabase.repositories import (
    SupabaseApplicationRepository,
    SupabaseTaskRepository,
)

BASE_URL = "https://project.supabase.test"
APP_ID = "3f2b8c1e-9a4d-4e7b-8c21-5d6f7a8b9c0d"


class _Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)


def _client(recorder: _Recorder, api_key: str = "service-key") -> SupabaseRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return SupabaseRESTClient(f"{BASE_URL}/", api_key, http_client=http)


def _event() -> TaskCreatedEvent:
    return TaskCreatedEvent(
        task_id="task-1",
        application_id=APP_ID,
        task_type="call",
        due_at="2025-03-11T09:30:00Z",
        created_at="2025-03-10T12:00:00.000Z",
    )


async def test_requests_authenticate_with_api_key() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))
    client = _client(recorder, api_key="anon-key")

    await client.table("tasks").select("id").execute()

    request = recorder.requests[0]
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["Authorization"] == "Bearer anon-key"
    assert str(request.url).startswith(f"{BASE_URL}/rest/v1/tasks?")


async def test_error_response_raises_platform_request_error() -> None:
    recorder = _Recorder(
        httpx.Response(403, json={"message": "permission denied for table tasks", "code": "42501"})
    )
    client = _client(recorder)

    with pytest.raises(PlatformRequestError) as exc_info:
        await client.table("tasks").select().execute()

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "permission denied for table tasks"
    assert exc_info.value.code == "42501"


async def test_error_without_json_body_uses_reason_phrase() -> None:
    recorder = _Recorder(httpx.Response(502, content=b"<html>bad gateway</html>"))
    client = _client(recorder)

    with pytest.raises(PlatformRequestError) as exc_info:
        await client.table("tasks").select().execute()
    assert exc_info.value.message == "Bad Gateway"


async def test_application_lookup_filters_by_id() -> None:
    recorder = _Recorder(httpx.Response(200, json=[{"id": APP_ID, "tenant_id": "tenant-7"}]))
    repo = SupabaseApplicationRepository(_client(recorder))

    application = await repo.get_by_id(APP_ID)

    assert application is not None
    assert application.tenant_id == "tenant-7"
    params = recorder.requests[0].url.params
    assert params["select"] == "id,tenant_id"
    assert params["id"] == f"eq.{APP_ID}"
    assert params["limit"] == "1"


async def test_application_lookup_returns_none_when_no_rows() -> None:
    repo = SupabaseApplicationRepository(_client(_Recorder(httpx.Response(200, json=[]))))
    assert await repo.get_by_id(APP_ID) is None


async def test_task_create_posts_row_and_returns_id() -> None:
    recorder = _Recorder(httpx.Response(201, json=[{"id": "task-9"}]))
    repo = SupabaseTaskRepository(_client(recorder))

    task_id = await repo.create(
        application_id=APP_ID,
        task_type="review",
        due_at="2025-03-11T09:30:00+01:00",
        tenant_id="tenant-7",
        status="pending",
    )

    assert task_id == "task-9"
    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.headers["Prefer"] == "return=representation"
    assert request.url.params["select"] == "id"
    assert json.loads(request.content) == {
        "application_id": APP_ID,
        "type": "review",
        "due_at": "2025-03-11T09:30:00+01:00",
        "tenant_id": "tenant-7",
        "status": "pending",
    }


async def test_task_create_without_returned_id_fails() -> None:
    repo = SupabaseTaskRepository(_client(_Recorder(httpx.Response(201, json=[]))))
    with pytest.raises(ValueError):
        await repo.create(APP_ID, "call", "2025-03-11T09:30:00Z", "tenant-7", "pending")


async def test_list_open_due_between_builds_window_query() -> None:
    recorder = _Recorder(
        httpx.Response(
            200,
            json=[
                {
                    "id": "t1",
                    "type": "email",
                    "application_id": APP_ID,
                    "due_at": "2025-03-10T15:00:00+00:00",
                    "status": "pending",
                    "description": None,
                }
            ],
        )
    )
    repo = SupabaseTaskRepository(_client(recorder))

    tasks = await repo.list_open_due_between(
        datetime(2025, 3, 10, tzinfo=timezone.utc),
        datetime(2025, 3, 11, tzinfo=timezone.utc),
    )

    assert [t.id for t in tasks] == ["t1"]
    assert tasks[0].due_at == datetime(2025, 3, 10, 15, 0, tzinfo=timezone.utc)
    assert tasks[0].description is None
    params = recorder.requests[0].url.params
    assert params["select"] == "id,type,application_id,due_at,status,description"
    assert params["status"] == "neq.completed"
    assert params.get_list("due_at") == [
        "gte.2025-03-10T00:00:00.000Z",
        "lt.2025-03-11T00:00:00.000Z",
    ]
    assert params["order"] == "due_at.asc"


async def test_mark_completed_patches_status_and_timestamp() -> None:
    recorder = _Recorder(httpx.Response(200, json=[{"id": "t1"}]))
    repo = SupabaseTaskRepository(_client(recorder))

    await repo.mark_completed("t1", datetime(2025, 3, 10, 14, 5, 30, 250000, tzinfo=timezone.utc))

    request = recorder.requests[0]
    assert request.method == "PATCH"
    assert request.url.params["id"] == "eq.t1"
    assert json.loads(request.content) == {
        "status": "completed",
        "completed_at": "2025-03-10T14:05:30.250Z",
    }


async def test_realtime_publisher_broadcasts_task_created() -> None:
    recorder = _Recorder(httpx.Response(202))
    publisher = RealtimeTaskEventPublisher(_client(recorder), topic="tasks")

    await publisher.publish_task_created(_event())

    request = recorder.requests[0]
    assert str(request.url) == f"{BASE_URL}/realtime/v1/api/broadcast"
    assert json.loads(request.content) == {
        "messages": [
            {
                "topic": "tasks",
                "event": "task.created",
                "payload": {
                    "task_id": "task-1",
                    "application_id": APP_ID,
                    "task_type": "call",
                    "due_at": "2025-03-11T09:30:00Z",
                    "created_at": "2025-03-10T12:00:00.000Z",
                },
            }
        ]
    }


async def test_realtime_publisher_raises_on_rejected_broadcast() -> None:
    publisher = RealtimeTaskEventPublisher(_client(_Recorder(httpx.Response(401, json={"error": "bad key"}))))
    with pytest.raises(PlatformRequestError):
        await publisher.publish_task_created(_event())


async def test_redis_publisher_publishes_json_on_topic_channel() -> None:
    redis_client = AsyncMock()
    redis_client.publish = AsyncMock(return_value=1)
    publisher = RedisTaskEventPublisher(redis_client=redis_client)

    await publisher.publish_task_created(_event())

    channel, message = redis_client.publish.await_args.args
    assert channel == "tasks"
    assert json.loads(message) == {"event": "task.created", "payload": _event().to_dict()}


async def test_redis_publisher_closes_client_when_unreachable(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failed ping closes the new client; each publish retry does the same."""
    created: list[AsyncMock] = []

    def _fake_redis(**kwargs: object) -> AsyncMock:
        client = AsyncMock()
        client.ping = AsyncMock(side_effect=redis_pubsub.redis.ConnectionError("refused"))
        created.append(client)
        return client

    monkeypatch.setattr(redis_pubsub.redis, "Redis", _fake_redis)
    publisher = RedisTaskEventPublisher()

    for _ in range(2):
        with pytest.raises(ConnectionError):
            await publisher.publish_task_created(_event())

    assert len(created) == 2
    for client in created:
        client.aclose.assert_awaited_once()
        client.publish.assert_not_awaited()
    assert not publisher.is_available()


async def test_injected_http_client_is_not_closed() -> None:
    http = httpx.AsyncClient(transport=httpx.MockTransport(_Recorder()))
    client = SupabaseRESTClient(BASE_URL, "key", http_client=http)

    await client.aclose()

    assert not http.is_closed
    await http.aclose()
