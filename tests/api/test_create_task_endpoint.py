"""POST /functions/v1/create-task: CORS, method handling, status codes and body shape."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import (
    get_service_platform_client,
    get_task_creation_service,
    get_task_event_publisher,
)
from app.application.use_cases.tasks import TaskCreationService
from app.infrastructure.messaging import NullTaskEventPublisher
from app.main import app
from tests.fakes import InMemoryApplicationRepository, InMemoryTaskRepository

URL = "/functions/v1/create-task"
APP_ID = "3f2b8c1e-9a4d-4e7b-8c21-5d6f7a8b9c0d"


def _future(hours: int = 24) -> str:
    return (datetime.now(timezone.utc) + timedelta(hours=hours)).isoformat()


@pytest.fixture
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def publisher() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(task_repo: InMemoryTaskRepository, publisher: AsyncMock) -> TaskCreationService:
    """Creation service over in-memory repos holding one application."""
    svc = TaskCreationService(
        InMemoryApplicationRepository({APP_ID: "tenant-7"}),
        task_repo,
        publisher,
    )
    app.dependency_overrides[get_task_creation_service] = lambda: svc
    return svc


def _assert_cors(response) -> None:
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Headers"] == (
        "authorization, x-client-info, apikey, content-type"
    )


async def test_preflight_returns_cors_headers_and_empty_body(client: AsyncClient) -> None:
    response = await client.options(URL)
    assert response.status_code == 200
    assert response.content == b""
    _assert_cors(response)


@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE", "TRACE", "PROPFIND"])
async def test_other_methods_return_405(client: AsyncClient, method: str) -> None:
    response = await client.request(method, URL)
    assert response.status_code == 405
    assert response.json() == {"success": False, "error": "Method not allowed"}
    _assert_cors(response)


async def test_head_returns_405_with_cors(client: AsyncClient) -> None:
    response = await client.head(URL)
    assert response.status_code == 405
    _assert_cors(response)


async def test_oversized_body_keeps_cors_headers(client: AsyncClient) -> None:
    response = await client.post(
        URL,
        content=b"x" * (1024 * 1024 + 1),
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 413
    assert response.json()["success"] is False
    _assert_cors(response)


async def test_create_task_returns_task_id(
    client: AsyncClient,
    service: TaskCreationService,
    task_repo: InMemoryTaskRepository,
    publisher: AsyncMock,
) -> None:
    due_at = _future()
    response = await client.post(
        URL, json={"application_id": APP_ID, "task_type": "call", "due_at": due_at}
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "task_id": "task-1"}
    _assert_cors(response)
    assert task_repo.created == [
        {
            "id": "task-1",
            "application_id": APP_ID,
            "type": "call",
            "due_at": due_at,
            "tenant_id": "tenant-7",
            "status": "pending",
        }
    ]
    publisher.publish_task_created.assert_awaited_once()


async def test_notification_failure_does_not_fail_request(
    client: AsyncClient, service: TaskCreationService, publisher: AsyncMock
) -> None:
    publisher.publish_task_created = AsyncMock(side_effect=ConnectionError("down"))
    response = await client.post(
        URL, json={"application_id": APP_ID, "task_type": "email", "due_at": _future()}
    )
    assert response.status_code == 200
    assert response.json()["success"] is True


@pytest.mark.parametrize(
    ("body", "error"),
    [
        ({"task_type": "call", "due_at": "2999-01-01T00:00:00Z"}, "Missing required fields: application_id, task_type, due_at"),
        ({"application_id": APP_ID, "task_type": "meeting", "due_at": "2999-01-01T00:00:00Z"}, "Invalid task_type. Must be one of: call, email, review"),
        ({"application_id": APP_ID, "task_type": "call", "due_at": "soon"}, "Invalid due_at timestamp format"),
        ({"application_id": APP_ID, "task_type": "call", "due_at": "2000-01-01T00:00:00Z"}, "due_at must be a future timestamp"),
        ({"application_id": "123", "task_type": "call", "due_at": "2999-01-01T00:00:00Z"}, "Invalid application_id format (must be UUID)"),
    ],
)
async def test_invalid_input_returns_400(
    client: AsyncClient,
    service: TaskCreationService,
    task_repo: InMemoryTaskRepository,
    body: dict,
    error: str,
) -> None:
    response = await client.post(URL, json=body)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": error}
    _assert_cors(response)
    assert task_repo.created == []


@pytest.mark.parametrize(
    ("due_at", "status"),
    [("0001-01-01T00:00:00+01:00", 400), ("9999-12-31T23:59:59-01:00", 200)],
)
async def test_due_at_at_calendar_edges(
    client: AsyncClient, service: TaskCreationService, due_at: str, status: int
) -> None:
    """Instants with no UTC form are still ordered against now."""
    response = await client.post(
        URL, json={"application_id": APP_ID, "task_type": "call", "due_at": due_at}
    )
    assert response.status_code == status
    assert response.json()["success"] is (status == 200)


async def test_json_array_body_returns_400(client: AsyncClient, service: TaskCreationService) -> None:
    response = await client.post(URL, json=[APP_ID, "call"])
    assert response.status_code == 400
    assert response.json()["error"].startswith("Missing required fields")


async def test_unknown_application_returns_400(client: AsyncClient, service: TaskCreationService) -> None:
    response = await client.post(
        URL,
        json={
            "application_id": "00000000-0000-0000-0000-000000000000",
            "task_type": "review",
            "due_at": _future(),
        },
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Application not found"}


async def test_insert_failure_returns_500(
    client: AsyncClient, service: TaskCreationService, task_repo: InMemoryTaskRepository
) -> None:
    task_repo.create = AsyncMock(side_effect=RuntimeError("constraint violation"))
    response = await client.post(
        URL, json={"application_id": APP_ID, "task_type": "call", "due_at": _future()}
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to create task"}


async def test_malformed_json_returns_500(client: AsyncClient, service: TaskCreationService) -> None:
    response = await client.post(
        URL, content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}
    _assert_cors(response)


async def test_missing_platform_config_returns_500(client: AsyncClient) -> None:
    """Without URL or service key, valid input answers 500 with a generic message."""
    app.dependency_overrides[get_service_platform_client] = lambda: None
    app.dependency_overrides[get_task_event_publisher] = lambda: NullTaskEventPublisher()

    response = await client.post(
        URL, json={"application_id": APP_ID, "task_type": "call", "due_at": _future()}
    )

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server configuration error"}


async def test_missing_platform_config_still_validates_first(client: AsyncClient) -> None:
    app.dependency_overrides[get_service_platform_client] = lambda: None
    app.dependency_overrides[get_task_event_publisher] = lambda: NullTaskEventPublisher()

    response = await client.post(URL, json={"task_type": "call"})

    assert response.status_code == 400
